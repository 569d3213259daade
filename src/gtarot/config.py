"""Loading of YAML spread files."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional

import yaml

from .card_request import CardRequest, parse_tokens
from .errors import InputError

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = "spread.png"


@dataclass
class SpreadConfig:
    """Contents of a spread file.

    Example file::

        cards:
          - strength
          - "!hermit"
          - 5 of swords
        output: reading.png
        spacing: 30
    """

    cards: List[str] = field(default_factory=list)
    output: Optional[str] = None
    spacing: Optional[int] = None

    def card_requests(self) -> List[CardRequest]:
        return parse_tokens(self.cards)


def load_config(path: str | Path) -> SpreadConfig:
    """Load and validate a YAML spread file.

    Args:
        path: Path to the spread file

    Returns:
        Parsed SpreadConfig

    Raises:
        InputError: If the file is missing, unreadable or not a valid spread file
    """
    path = Path(path)

    if not path.is_file():
        raise InputError("Spread file does not exist", path)

    try:
        with path.open("r", encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise InputError(f"Invalid YAML ({e})", path) from e
    except OSError as e:
        raise InputError(f"Could not read spread file ({e})", path) from e

    # safe_load returns None for empty files
    if content is None:
        content = {}
    if not isinstance(content, dict):
        raise InputError("Spread file must contain a mapping", path)

    return _parse_config(content, path)


def _parse_config(content: dict[str, Any], path: Path) -> SpreadConfig:
    cards = content.get("cards")
    if cards is None:
        cards = []
    if not isinstance(cards, list):
        raise InputError("'cards' must be a list", path)

    output = content.get("output")
    if output is not None:
        output = str(output)

    spacing = content.get("spacing")
    # bool is an int subclass, reject it explicitly
    if spacing is not None and (isinstance(spacing, bool) or not isinstance(spacing, int) or spacing < 0):
        raise InputError("'spacing' must be a non-negative integer", path)

    logger.debug("Loaded %d cards from %s", len(cards), path)
    return SpreadConfig(
        cards=[str(card) for card in cards if card is not None],
        output=output or None,
        spacing=spacing,
    )

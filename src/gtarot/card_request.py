"""Card requests parsed from user input."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

# Prefix marking a card that should be drawn upside down
REVERSED_MARKER = "!"


@dataclass(frozen=True)
class CardRequest:
    """A single card of a spread and its orientation."""

    name: str
    reversed: bool = False


def parse_token(token: str) -> Optional[CardRequest]:
    """
    Turn one raw token (e.g. ``"!hermit"``) into a CardRequest.

    Surrounding whitespace is trimmed. Returns None for empty tokens.
    """
    token = token.strip()
    if not token:
        return None
    reversed_ = token.startswith(REVERSED_MARKER)
    name = token[len(REVERSED_MARKER):].strip() if reversed_ else token
    if not name:
        return None
    return CardRequest(name=name, reversed=reversed_)


def parse_tokens(tokens: Iterable[str]) -> List[CardRequest]:
    """Parse a sequence of raw tokens, skipping empty ones."""
    requests: List[CardRequest] = []
    for token in tokens:
        request = parse_token(str(token))
        if request is not None:
            requests.append(request)
    return requests


def parse_csv(text: str) -> List[CardRequest]:
    """
    Parse a comma-separated card list.

    Example:
        >>> parse_csv("strength, !hermit,,5_of_swords")
        [CardRequest(name='strength', reversed=False), CardRequest(name='hermit', reversed=True), CardRequest(name='5_of_swords', reversed=False)]
    """
    return parse_tokens(text.split(","))

"""Mapping between user-facing card names and stored asset keys."""
from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

CARD_EXTENSION = ".png"

MAJOR_PREFIX = "major_arcana_"
MINOR_PREFIX = "minor_arcana_"

# Names already carrying one of these are used as-is
QUALIFIED_PREFIXES = ("major_", "minor_")

# "<rank>_of_<suit>" marks a minor arcana card
OF_SEPARATOR = "_of_"


def normalize(name: str) -> str:
    """Lowercase a card name and turn spaces and hyphens into underscores."""
    return name.lower().replace(" ", "_").replace("-", "_")


def resolve(name: str) -> str:
    """
    Map a card name to the key of its stored image.

    The branches are checked in order:

    - names already starting with ``major_`` / ``minor_`` pass through
    - ``<rank>_of_<suit>`` becomes ``minor_arcana_<suit>_<rank>``
      (suit first, as the assets are stored); this also catches
      "wheel of fortune", which has to be requested as
      "major_arcana_wheel_of_fortune"
    - anything else is a major arcana card

    Example:
        >>> resolve("5 of Swords")
        'minor_arcana_swords_5.png'
        >>> resolve("strength")
        'major_arcana_strength.png'
    """
    card = normalize(name)
    if card.startswith(QUALIFIED_PREFIXES):
        key = card + CARD_EXTENSION
    elif OF_SEPARATOR in card:
        parts = card.split(OF_SEPARATOR)
        key = f"{MINOR_PREFIX}{parts[1]}_{parts[0]}{CARD_EXTENSION}"
    else:
        key = MAJOR_PREFIX + card + CARD_EXTENSION
    logger.debug("Resolved card %r to %s", name, key)
    return key


def display_name(key: str) -> str | None:
    """
    Reverse :func:`resolve` for listing: turn an asset key into the name a
    user would type. Returns None for keys that are not card images.
    """
    base = key[: -len(CARD_EXTENSION)] if key.endswith(CARD_EXTENSION) else key
    parts = base.split("_")
    if base.startswith(MAJOR_PREFIX):
        return base[len(MAJOR_PREFIX):]
    if base.startswith(MINOR_PREFIX) and len(parts) >= 4:
        return f"{'_'.join(parts[3:])}{OF_SEPARATOR}{parts[2]}"
    return None

"""Error types raised while building a tarot spread."""
from __future__ import annotations

from pathlib import Path


class GTarotError(Exception):
    """Base class for every error the spread pipeline raises."""


class InputError(GTarotError):
    """A spread file or asset source is missing, unreadable or malformed."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        self.path = path
        if path is not None:
            message = f"{message}: {path}"
        super().__init__(message)


class NotFoundError(GTarotError, LookupError):
    """No card image is stored under the resolved asset key."""

    def __init__(self, key: str, card: str | None = None) -> None:
        self.key = key
        self.card = card
        if card is not None:
            message = f"card '{card}' not found (no asset {key})"
        else:
            message = f"no asset {key}"
        super().__init__(message)


class DecodeError(GTarotError):
    """The bytes behind an asset key are not a valid image."""

    def __init__(self, key: str, reason: str = "") -> None:
        self.key = key
        message = f"could not decode image {key}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class EmptyInputError(GTarotError, ValueError):
    """There are no cards to lay out."""

    def __init__(self, message: str = "No cards provided.") -> None:
        super().__init__(message)


class OutputError(GTarotError):
    """The output image could not be created or written."""

    def __init__(self, path: Path | str, reason: str = "") -> None:
        self.path = path
        message = f"could not write {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)

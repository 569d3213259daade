"""
Package initialization for gtarot.

This package lays out tarot card images side by side in a single PNG,
rotating reversed cards by 180 degrees.

Modules:
    - card_request: CardRequest and parsing of raw card tokens
    - names: card name <-> asset key mapping
    - asset_store: card images backed by a directory or ZIP archive
    - orientation: 180 degree rotation of reversed cards
    - compositor: horizontal layout and PNG encoding
    - config: YAML spread files
    - spread: High-level API orchestrating the above modules
"""

from .asset_store import (
    AssetStore,
    DirectoryAssetStore,
    ZipAssetStore,
    open_asset_store,
)
from .card_request import CardRequest, parse_csv, parse_token, parse_tokens
from .compositor import compose, encode_png, write_spread
from .config import SpreadConfig, load_config
from .errors import (
    DecodeError,
    EmptyInputError,
    GTarotError,
    InputError,
    NotFoundError,
    OutputError,
)
from .names import display_name, resolve
from .orientation import reverse
from .spread import SpreadResult, available_cards, build_spread, list_cards, render_spread

__all__ = [
    # Data classes
    "CardRequest",
    "SpreadConfig",
    "SpreadResult",
    # Asset stores
    "AssetStore",
    "DirectoryAssetStore",
    "ZipAssetStore",
    "open_asset_store",
    # Core functions
    "parse_csv",
    "parse_token",
    "parse_tokens",
    "resolve",
    "display_name",
    "reverse",
    "compose",
    "encode_png",
    "write_spread",
    "load_config",
    "render_spread",
    "build_spread",
    "available_cards",
    "list_cards",
    # Errors
    "GTarotError",
    "InputError",
    "NotFoundError",
    "DecodeError",
    "EmptyInputError",
    "OutputError",
]

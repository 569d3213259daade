"""Read-only stores of card images, backed by a directory or a ZIP archive."""
from __future__ import annotations

import logging
import zipfile
import zlib
from abc import ABC, abstractmethod
from io import BytesIO
from pathlib import Path
from typing import List

from PIL import Image, UnidentifiedImageError

from .errors import DecodeError, InputError, NotFoundError

logger = logging.getLogger(__name__)

# Supported image extensions
IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".gif", ".bmp", ".webp"}

# Folder holding the card images inside a ZIP archive
ZIP_PREFIX = "cards/"


def find_cards_dir(start: Path | None = None) -> Path:
    """
    Find the card images bundled with the package.

    Default: <package>/cards
    """
    base = (start or Path(__file__)).resolve()
    cards_dir = base.parent / "cards"
    if not cards_dir.is_dir():
        raise InputError("Cards directory not found", cards_dir)
    return cards_dir


def is_image_file(name: str) -> bool:
    """Check if a filename has a supported image extension."""
    return Path(name).suffix.lower() in IMAGE_EXTENSIONS


def decode_image(data: bytes, key: str) -> Image.Image:
    """
    Decode raw image bytes into a fully loaded Pillow image.

    Raises:
        DecodeError: If the bytes are not a readable image
    """
    try:
        with Image.open(BytesIO(data)) as img:
            img.load()
            return img.copy()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError) as e:
        raise DecodeError(key, f"{type(e).__name__}: {e}") from e


class AssetStore(ABC):
    """Card images looked up by asset key (e.g. ``major_arcana_strength.png``)."""

    @abstractmethod
    def read(self, key: str) -> bytes:
        """Return the raw bytes stored under `key` or raise NotFoundError."""

    @abstractmethod
    def list_keys(self) -> List[str]:
        """Return all stored asset keys, sorted alphabetically."""

    def fetch(self, key: str) -> Image.Image:
        """
        Fetch and decode the image stored under `key`.

        Raises:
            NotFoundError: If there is no asset for `key`
            DecodeError: If the asset is not a valid image
        """
        data = self.read(key)
        img = decode_image(data, key)
        logger.debug("Fetched %s (%dx%d)", key, img.width, img.height)
        return img

    def __contains__(self, key: object) -> bool:
        return key in self.list_keys()


class DirectoryAssetStore(AssetStore):
    """Card images stored as files directly inside one directory."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def read(self, key: str) -> bytes:
        path = self.root / key
        # Keys never address anything outside the store
        if Path(key).name != key or not path.is_file():
            raise NotFoundError(key)
        return path.read_bytes()

    def list_keys(self) -> List[str]:
        return sorted(
            p.name for p in self.root.iterdir()
            if p.is_file() and is_image_file(p.name)
        )

    def __repr__(self) -> str:
        return f"DirectoryAssetStore({str(self.root)!r})"


class ZipAssetStore(AssetStore):
    """
    Card images stored under a folder (default ``cards/``) of a ZIP archive.

    Filters out:
    - Directory entries (paths ending with /)
    - macOS metadata files (__MACOSX/)
    """

    def __init__(self, zip_path: Path, prefix: str = ZIP_PREFIX) -> None:
        self.zip_path = Path(zip_path)
        self.prefix = prefix

    def read(self, key: str) -> bytes:
        with zipfile.ZipFile(self.zip_path, "r") as zf:
            try:
                return zf.read(self.prefix + key)
            except KeyError:
                raise NotFoundError(key) from None
            except (zipfile.BadZipFile, zlib.error) as e:
                raise DecodeError(key, f"{type(e).__name__}: {e}") from e

    def list_keys(self) -> List[str]:
        with zipfile.ZipFile(self.zip_path, "r") as zf:
            names = zf.namelist()
        return sorted(
            name[len(self.prefix):]
            for name in names
            if name.startswith(self.prefix)
            and not name.endswith("/")
            and not name.startswith("__MACOSX/")
            and "/" not in name[len(self.prefix):]
            and is_image_file(name)
        )

    def __repr__(self) -> str:
        return f"ZipAssetStore({str(self.zip_path)!r}, prefix={self.prefix!r})"


def open_asset_store(path: Path | str | None = None) -> AssetStore:
    """
    Open the card images at `path`.

    - ``None``: the cards bundled with the package
    - a ``.zip`` file: images under ``cards/`` inside the archive
    - a directory: images directly inside it

    Raises:
        InputError: If `path` does not exist or is not a ZIP archive
    """
    if path is None:
        return DirectoryAssetStore(find_cards_dir())

    path = Path(path)
    if path.is_dir():
        return DirectoryAssetStore(path)
    if path.is_file():
        if not zipfile.is_zipfile(path):
            raise InputError("Not a directory or ZIP archive", path)
        return ZipAssetStore(path)
    raise InputError("Cards source not found", path)

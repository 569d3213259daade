"""Tests for card image stores."""

import zipfile
from pathlib import Path

import pytest
from PIL import Image

from conftest import CARD_COLORS, CARD_HEIGHT, CARD_WIDTH
from gtarot.asset_store import (
    DirectoryAssetStore,
    ZipAssetStore,
    find_cards_dir,
    is_image_file,
    open_asset_store,
)
from gtarot.errors import DecodeError, InputError, NotFoundError


class TestIsImageFile:
    @pytest.mark.parametrize("name", ["a.png", "b.PNG", "c.jpeg", "cards/d.webp"])
    def test_images(self, name: str) -> None:
        assert is_image_file(name)

    @pytest.mark.parametrize("name", ["a.txt", "b", "c.pdf"])
    def test_other_files(self, name: str) -> None:
        assert not is_image_file(name)


class TestDirectoryAssetStore:
    def test_list_keys_only_images_sorted(self, store: DirectoryAssetStore) -> None:
        assert store.list_keys() == sorted(CARD_COLORS)

    def test_fetch_decodes_image(self, store: DirectoryAssetStore) -> None:
        img = store.fetch("major_arcana_strength.png")

        assert isinstance(img, Image.Image)
        assert img.size == (CARD_WIDTH, CARD_HEIGHT)
        assert img.getpixel((CARD_WIDTH - 1, CARD_HEIGHT - 1)) == CARD_COLORS["major_arcana_strength.png"]

    def test_missing_key(self, store: DirectoryAssetStore) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            store.fetch("major_arcana_fool.png")
        assert exc_info.value.key == "major_arcana_fool.png"

    def test_key_cannot_leave_the_store(self, store: DirectoryAssetStore, cards_dir: Path) -> None:
        (cards_dir.parent / "secret.png").write_bytes(b"x")
        with pytest.raises(NotFoundError):
            store.read("../secret.png")

    def test_broken_image(self, store: DirectoryAssetStore, cards_dir: Path) -> None:
        (cards_dir / "major_arcana_broken.png").write_bytes(b"definitely not a png")
        with pytest.raises(DecodeError) as exc_info:
            store.fetch("major_arcana_broken.png")
        assert exc_info.value.key == "major_arcana_broken.png"
        assert "major_arcana_broken.png" in str(exc_info.value)

    def test_oversized_image(self, store: DirectoryAssetStore, monkeypatch: pytest.MonkeyPatch) -> None:
        """Images far above the pixel limit are reported as undecodable."""
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)

        with pytest.raises(DecodeError) as exc_info:
            store.fetch("major_arcana_strength.png")
        assert "DecompressionBombError" in str(exc_info.value)

    def test_contains(self, store: DirectoryAssetStore) -> None:
        assert "minor_arcana_swords_5.png" in store
        assert "major_arcana_fool.png" not in store


class TestZipAssetStore:
    def test_list_keys_skips_metadata_and_other_folders(self, cards_zip: Path) -> None:
        assert ZipAssetStore(cards_zip).list_keys() == sorted(CARD_COLORS)

    def test_fetch(self, cards_zip: Path) -> None:
        img = ZipAssetStore(cards_zip).fetch("minor_arcana_swords_5.png")
        assert img.size == (CARD_WIDTH, CARD_HEIGHT)
        assert img.getpixel((10, 10)) == CARD_COLORS["minor_arcana_swords_5.png"]

    def test_missing_key(self, cards_zip: Path) -> None:
        with pytest.raises(NotFoundError):
            ZipAssetStore(cards_zip).fetch("major_arcana_fool.png")

    def test_corrupt_member(self, cards_dir: Path, tmp_path: Path) -> None:
        """A member failing its CRC check is a decode error for that key."""
        card = (cards_dir / "major_arcana_strength.png").read_bytes()
        zip_path = tmp_path / "corrupt.zip"
        with zipfile.ZipFile(zip_path, "w", compression=zipfile.ZIP_STORED) as zf:
            zf.writestr("cards/major_arcana_strength.png", card)

        raw = bytearray(zip_path.read_bytes())
        offset = raw.find(card) + len(card) // 2
        raw[offset] ^= 0xFF
        zip_path.write_bytes(bytes(raw))

        with pytest.raises(DecodeError) as exc_info:
            ZipAssetStore(zip_path).fetch("major_arcana_strength.png")
        assert exc_info.value.key == "major_arcana_strength.png"

    def test_custom_prefix(self, cards_zip: Path) -> None:
        store = ZipAssetStore(cards_zip, prefix="other/")
        assert store.list_keys() == ["major_arcana_fool.png"]
        with pytest.raises(DecodeError):
            store.fetch("major_arcana_fool.png")


class TestOpenAssetStore:
    def test_directory(self, cards_dir: Path) -> None:
        store = open_asset_store(cards_dir)
        assert isinstance(store, DirectoryAssetStore)
        assert store.root == cards_dir

    def test_zip(self, cards_zip: Path) -> None:
        assert isinstance(open_asset_store(str(cards_zip)), ZipAssetStore)

    def test_missing_path(self, tmp_path: Path) -> None:
        with pytest.raises(InputError) as exc_info:
            open_asset_store(tmp_path / "nope")
        assert "nope" in str(exc_info.value)

    def test_file_that_is_not_a_zip(self, tmp_path: Path) -> None:
        path = tmp_path / "deck.zip"
        path.write_text("plain text")
        with pytest.raises(InputError):
            open_asset_store(path)

    def test_default_is_bundled_cards(self) -> None:
        store = open_asset_store()
        assert isinstance(store, DirectoryAssetStore)
        assert store.root == find_cards_dir()


class TestFindCardsDir:
    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(InputError):
            find_cards_dir(tmp_path / "asset_store.py")

    def test_next_to_module(self, tmp_path: Path) -> None:
        (tmp_path / "cards").mkdir()
        assert find_cards_dir(tmp_path / "asset_store.py") == (tmp_path / "cards").resolve()

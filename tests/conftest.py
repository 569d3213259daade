import zipfile
from pathlib import Path

import pytest
from PIL import Image, ImageDraw

from gtarot.asset_store import DirectoryAssetStore

CARD_WIDTH = 20
CARD_HEIGHT = 30

MARKER = (0, 0, 0)

CARD_COLORS = {
    "major_arcana_strength.png": (200, 40, 40),
    "major_arcana_hermit.png": (40, 200, 40),
    "minor_arcana_swords_5.png": (40, 40, 200),
}


def make_card(color: tuple[int, int, int], size: tuple[int, int] = (CARD_WIDTH, CARD_HEIGHT)) -> Image.Image:
    """A plain card with a 4x4 black marker in its top-left corner."""
    img = Image.new("RGB", size, color)
    ImageDraw.Draw(img).rectangle((0, 0, 3, 3), fill=MARKER)
    return img


@pytest.fixture
def cards_dir(tmp_path: Path) -> Path:
    """Directory with three card images and a stray non-image file."""
    root = tmp_path / "cards"
    root.mkdir()
    for name, color in CARD_COLORS.items():
        make_card(color).save(root / name)
    (root / "README.txt").write_text("not a card")
    return root


@pytest.fixture
def store(cards_dir: Path) -> DirectoryAssetStore:
    return DirectoryAssetStore(cards_dir)


@pytest.fixture
def cards_zip(tmp_path: Path, cards_dir: Path) -> Path:
    """ZIP archive holding the same cards under cards/."""
    zip_path = tmp_path / "deck.zip"
    with zipfile.ZipFile(zip_path, "w") as zf:
        zf.writestr("cards/", "")
        for name in CARD_COLORS:
            zf.write(cards_dir / name, f"cards/{name}")
        zf.writestr("__MACOSX/cards/._major_arcana_strength.png", b"junk")
        zf.writestr("cards/notes.txt", "not a card")
        zf.writestr("other/major_arcana_fool.png", b"outside the cards folder")
    return zip_path

"""Horizontal spread composition and PNG output."""
from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path
from typing import Sequence, Tuple

from PIL import Image

from .errors import EmptyInputError, OutputError

logger = logging.getLogger(__name__)

# Default gap between two cards, in pixels
DEFAULT_SPACING = 20

WHITE: Tuple[int, int, int, int] = (255, 255, 255, 255)


def spread_size(count: int, card_width: int, card_height: int, spacing: int = DEFAULT_SPACING) -> Tuple[int, int]:
    """
    Size of a canvas holding `count` cards side by side.

    Example:
        >>> spread_size(3, 100, 160, spacing=20)
        (340, 160)
    """
    return count * card_width + (count - 1) * spacing, card_height


def compose(
    images: Sequence[Image.Image],
    spacing: int = DEFAULT_SPACING,
    background: Tuple[int, int, int, int] = WHITE,
) -> Image.Image:
    """
    Lay out card images left to right on a new canvas.

    - Images are used in the order of `images`.
    - All images are expected to share the size of the first one.
    - Each card is anchored at its centre: card i sits at
      (i * (w + spacing) + w/2, h/2).
    - Cards are copied onto the canvas, transparent pixels included.

    Args:
        images: Card images, already oriented
        spacing: Gap between neighbouring cards in pixels
        background: RGBA fill of the canvas

    Returns:
        The composed RGBA canvas

    Raises:
        EmptyInputError: If `images` is empty
        ValueError: If `spacing` is negative
    """
    if not images:
        raise EmptyInputError("No card images to compose - input list is empty.")
    if spacing < 0:
        raise ValueError(f"spacing must be >= 0, got {spacing}")

    card_w, card_h = images[0].size
    canvas = Image.new("RGBA", spread_size(len(images), card_w, card_h, spacing), background)

    x = 0
    for img in images:
        center_x = x + card_w // 2
        center_y = card_h // 2
        left = center_x - img.width // 2
        top = center_y - img.height // 2
        canvas.paste(img.convert("RGBA"), (left, top))
        x += card_w + spacing

    logger.debug("Composed %d cards into %dx%d canvas", len(images), canvas.width, canvas.height)
    return canvas


def encode_png(img: Image.Image) -> bytes:
    """Encode `img` as PNG. No metadata chunks are written, so equal images give equal bytes."""
    buffer = BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


def write_spread(data: bytes, output_path: Path) -> None:
    """
    Write encoded spread bytes to `output_path`, creating parent folders.

    Raises:
        OutputError: If the file cannot be created or written
    """
    output_path = Path(output_path)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with output_path.open("wb") as f:
            f.write(data)
    except OSError as e:
        raise OutputError(output_path, f"{type(e).__name__}: {e}") from e
    logger.debug("Wrote %d bytes to %s", len(data), output_path)


def get_file_size_str(file_path: Path) -> str:
    """
    Get a human-readable file size string.

    Args:
        file_path: Path to the file

    Returns:
        Size string like "1.5 MB" or "256.0 KB"
    """
    file_size = file_path.stat().st_size
    if file_size >= 1024 * 1024:
        return f"{file_size / (1024 * 1024):.1f} MB"
    else:
        return f"{file_size / 1024:.1f} KB"

"""High-level API: turn card requests into a spread image file."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from PIL import Image
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn, TimeElapsedColumn
from rich.table import Table

from .asset_store import AssetStore
from .card_request import CardRequest
from .compositor import DEFAULT_SPACING, compose, encode_png, get_file_size_str, write_spread
from .errors import EmptyInputError, NotFoundError
from .names import display_name, resolve
from .orientation import orient

logger = logging.getLogger(__name__)

# Rich console instance for user-facing output
console = Console()


@dataclass
class SpreadResult:
    """Summary of a written spread."""

    output_path: Path
    card_count: int
    width: int
    height: int


def load_card_image(store: AssetStore, request: CardRequest) -> Image.Image:
    """
    Resolve, fetch and orient the image for one card.

    Raises:
        NotFoundError: With the requested card name attached
        DecodeError: If the stored image is broken
    """
    key = resolve(request.name)
    try:
        img = store.fetch(key)
    except NotFoundError as e:
        raise NotFoundError(key, card=request.name) from e
    return orient(img, request.reversed)


def load_card_images(
    store: AssetStore,
    requests: Sequence[CardRequest],
    progress: Optional[Progress] = None,
) -> List[Image.Image]:
    """
    Load the images of all requested cards, in order.

    Args:
        store: Where the card images live
        requests: Cards of the spread
        progress: Rich Progress instance for progress display
    """
    task_id = None
    if progress is not None:
        task_id = progress.add_task("[cyan]Loading cards...", total=len(requests))

    images: List[Image.Image] = []
    for request in requests:
        if progress is not None and task_id is not None:
            progress.update(task_id, advance=1, description=f"[cyan]Loading [bold]{escape(request.name)}[/bold]...")
        images.append(load_card_image(store, request))
    return images


def render_spread(
    store: AssetStore,
    requests: Sequence[CardRequest],
    spacing: int = DEFAULT_SPACING,
    progress: Optional[Progress] = None,
) -> Image.Image:
    """Load all cards and compose them into one image, without writing anything."""
    if not requests:
        raise EmptyInputError()
    images = load_card_images(store, requests, progress=progress)
    return compose(images, spacing=spacing)


def build_spread(
    requests: Sequence[CardRequest],
    output_path: Path,
    store: AssetStore,
    spacing: int = DEFAULT_SPACING,
    quiet: bool = False,
) -> SpreadResult:
    """
    High-level helper:
    - Loads every requested card from the store (rotating reversed ones)
    - Lays them out side by side and writes a single PNG.

    Nothing is written unless all cards load.

    Args:
        requests: Cards of the spread, in order
        output_path: Path to the output PNG file
        store: Where the card images live
        spacing: Gap between cards in pixels
        quiet: If True, skip console output
    """
    if not requests:
        raise EmptyInputError()

    out = Console(quiet=True) if quiet else console

    out.print()
    out.print(Panel.fit(
        "[bold magenta]🔮 Tarot Spread[/bold magenta]\n"
        f"[dim]Laying out {len(requests)} cards[/dim]",
        border_style="magenta",
    ))
    out.print()

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=out,
    ) as progress:
        canvas = render_spread(store, requests, spacing=spacing, progress=progress)

    write_spread(encode_png(canvas), output_path)
    result = SpreadResult(
        output_path=output_path,
        card_count=len(requests),
        width=canvas.width,
        height=canvas.height,
    )

    # Print summary
    out.print()

    table = Table(box=box.ROUNDED, border_style="green")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    cards = ", ".join(f"{r.name} (reversed)" if r.reversed else r.name for r in requests)
    table.add_row("🃏 Cards", f"[bold]{escape(cards)}[/bold]")
    table.add_row("📐 Size", f"[bold]{result.width}x{result.height}[/bold]")
    table.add_row("💾 Output file", f"[bold]{escape(str(output_path))}[/bold]")
    table.add_row("📊 File size", f"[bold]{get_file_size_str(output_path)}[/bold]")

    out.print(table)
    out.print()
    out.print(f"[green]✔[/green] [bold green]Tarot spread saved to {escape(str(output_path))}[/bold green]")
    out.print()

    logger.info("Saved %d card spread to %s", result.card_count, output_path)
    return result


def available_cards(store: AssetStore) -> List[str]:
    """Names of all cards in `store`, as a user would type them."""
    names = []
    for key in store.list_keys():
        name = display_name(key)
        if name is not None:
            names.append(name)
    return names


def list_cards(store: AssetStore) -> List[str]:
    """Print every available card name, one per line."""
    names = available_cards(store)
    for name in names:
        console.print(name, markup=False, highlight=False)
    return names

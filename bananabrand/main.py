"""
BananaBrand: brand graphic generator (CLI)

Usage:
  python -m bananabrand.main --list
  python -m bananabrand.main --prompt "launch day announcement" --colors corporate-blue --type banner --aspect 16:9
  python -m bananabrand.main --prompt "coffee cup mascot" --refine "make it wink" --refine "add steam"
  python -m bananabrand.main --image outputs/mascot.png --refine "remove the background"
  python -m bananabrand.main --prompt "spring sale" --custom-colors "Spring=#FDE68A,#86EFAC,#1E293B"
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table

from .catalog import ColorScheme, OptionCatalogs, parse_color_scheme_arg
from .errors import BananaBrandError
from .export import load_image
from .generator import GeminiGraphicClient
from .settings import Settings
from .studio import Studio

load_dotenv()

console = Console()


# ── CLI ───────────────────────────────────────────────────────────────────────

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="BananaBrand: on-brand graphics with Gemini"
    )
    parser.add_argument("--prompt", default="", help="What the graphic should show")
    parser.add_argument("--colors", default=None, help="Color scheme id (see --list)")
    parser.add_argument("--style", default=None, help="Visual style id (see --list)")
    parser.add_argument("--type", dest="graphic_type", default=None, help="Graphic type id (see --list)")
    parser.add_argument("--aspect", default=None, help="Aspect ratio, e.g. 16:9 (see --list)")
    parser.add_argument(
        "--custom-colors",
        default=None,
        metavar="NAME=#HEX,#HEX",
        help="Add a custom color scheme and select it",
    )
    parser.add_argument(
        "--image",
        default=None,
        help="Start from an existing image file instead of generating one",
    )
    parser.add_argument(
        "--refine",
        action="append",
        default=[],
        help="Refinement instruction, applied in order (repeatable)",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Output directory (default: $BANANABRAND_OUTPUT_DIR or outputs/)",
    )
    parser.add_argument("--list", action="store_true", help="Show available options and exit")
    return parser.parse_args(argv)


# ── Output helpers ────────────────────────────────────────────────────────────

def display_catalogs(catalogs: OptionCatalogs) -> None:
    table = Table(title="Color schemes", show_lines=False)
    table.add_column("id", style="cyan")
    table.add_column("name")
    table.add_column("colors", style="dim")
    for scheme in catalogs.color_schemes:
        table.add_row(scheme.id, scheme.name, ", ".join(scheme.colors))
    console.print(table)

    table = Table(title="Visual styles")
    table.add_column("id", style="cyan")
    table.add_column("name")
    table.add_column("description", style="dim")
    for style in catalogs.visual_styles:
        table.add_row(style.id, style.name, style.description)
    console.print(table)

    table = Table(title="Graphic types / aspect ratios")
    table.add_column("type id", style="cyan")
    table.add_column("type")
    table.add_column("ratio", style="cyan")
    table.add_column("label")
    types_ = list(catalogs.graphic_types)
    ratios = list(catalogs.aspect_ratios)
    for i in range(max(len(types_), len(ratios))):
        t = types_[i] if i < len(types_) else None
        r = ratios[i] if i < len(ratios) else None
        table.add_row(
            t.id if t else "", t.name if t else "",
            r.id if r else "", r.name if r else "",
        )
    console.print(table)


def _show_config(studio: Studio) -> None:
    cfg = studio.config
    console.print(Panel(
        f"[bold]Prompt:[/bold] {cfg.prompt or '-'}\n"
        f"[bold]Colors:[/bold] {cfg.color_scheme_id}   "
        f"[bold]Style:[/bold] {cfg.visual_style_id}   "
        f"[bold]Type:[/bold] {cfg.graphic_type_id}   "
        f"[bold]Aspect:[/bold] {cfg.aspect_ratio}",
        title="Request",
        border_style="yellow",
    ))


# ── Pipeline ──────────────────────────────────────────────────────────────────

def add_custom_colors(catalogs: OptionCatalogs, value: str) -> ColorScheme:
    """Parse a --custom-colors value and add it to the color scheme catalog."""
    scheme = parse_color_scheme_arg(value, catalogs.color_schemes.unique_id)
    catalogs.color_schemes.add(scheme)
    console.print(f"  [dim]custom scheme added: {scheme.id} ({', '.join(scheme.colors)})[/dim]")
    return scheme


async def run(args: argparse.Namespace, studio: Studio, output_dir: Path) -> int:
    if args.custom_colors:
        scheme = add_custom_colors(studio.catalogs, args.custom_colors)
        studio.select(color_scheme_id=scheme.id)

    studio.select(
        color_scheme_id=args.colors,
        visual_style_id=args.style,
        graphic_type_id=args.graphic_type,
        aspect_ratio=args.aspect,
    )
    studio.set_prompt(args.prompt)
    _show_config(studio)

    if args.image:
        studio.current_image = load_image(Path(args.image))
        console.print(f"  [dim]starting from {args.image}[/dim]")
    else:
        console.print(Rule("[bold cyan]Generating[/bold cyan]"))
        if await studio.generate() is None:
            console.print(f"  [red]✗ {studio.error}[/red]")
            return 1
        console.print("  [green]✓ image generated[/green]")

    for i, text in enumerate(args.refine, 1):
        console.print(Rule(f"[bold cyan]Refinement {i}/{len(args.refine)}[/bold cyan]"))
        console.print(f"  [dim]{text}[/dim]")
        if await studio.refine(text) is None:
            console.print(f"  [yellow]⚠ {studio.error} (keeping previous image)[/yellow]")
            break
        console.print("  [green]✓ refined[/green]")

    path = studio.save_current_image(output_dir)
    if path is not None:
        console.print(f"\n[bold green]Saved →[/bold green] {path}")
    return 1 if studio.error else 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    settings = Settings.from_env()

    logging.basicConfig(
        format="%(asctime)s — %(levelname)s — %(name)s — %(message)s",
        level=getattr(logging, settings.log_level, logging.INFO),
    )

    if args.list:
        catalogs = OptionCatalogs()
        try:
            if args.custom_colors:
                add_custom_colors(catalogs, args.custom_colors)
        except (BananaBrandError, ValueError) as e:
            console.print(f"[red]✗ {e}[/red]")
            return 1
        display_catalogs(catalogs)
        return 0

    if not args.prompt and not args.image:
        console.print("[red]Either --prompt or --image is required.[/red]")
        return 2

    try:
        client = GeminiGraphicClient.from_settings(settings)
        studio = Studio(client)
        output_dir = Path(args.output) if args.output else settings.output_dir
        return asyncio.run(run(args, studio, output_dir))
    except (BananaBrandError, ValueError) as e:
        console.print(f"[red]✗ {e}[/red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())

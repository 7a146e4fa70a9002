"""
Catalogs: the selectable options a graphic request is built from.

Four kinds of option, each looked up by id:
  color scheme: named palette of hex codes
  visual style: named style with a prompt-ready description
  graphic type: what to make (logo, banner, social post...)
  aspect ratio: output frame, id is the ratio itself ("16:9")

OptionCatalogs is the mutable set the studio owns (users can add or remove
entries at runtime). Prompt building never reads it directly: it receives a
GenerationContext, a frozen snapshot taken at call time.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Dict, Generic, Iterator, List, Optional, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from .errors import DuplicateOptionError, UnknownOptionError


# ── Option models ────────────────────────────────────────────────────────────

class ColorScheme(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1, description="Catalog id, e.g. 'corporate-blue'")
    name: str = Field(description="Display name, e.g. 'Corporate Blue'")
    colors: Tuple[str, ...] = Field(description="Hex codes, in palette order")


class VisualStyle(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str
    description: str = Field(description="Injected verbatim into the prompt")


class GraphicType(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str = Field(description="Injected into 'Create a <name>.'")


class AspectRatioOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(pattern=r"^\d+:\d+$", description="Ratio value sent to the API, e.g. '16:9'")
    name: str = Field(description="Label, e.g. 'Landscape (16:9)'")


# ── Built-in presets ─────────────────────────────────────────────────────────

DEFAULT_COLOR_SCHEMES: Tuple[ColorScheme, ...] = (
    ColorScheme(id="banana-sunrise", name="Banana Sunrise",
                colors=("#FACC15", "#F97316", "#1F2937", "#FFFBEB")),
    ColorScheme(id="corporate-blue", name="Corporate Blue",
                colors=("#0F172A", "#1E40AF", "#3B82F6", "#F8FAFC")),
    ColorScheme(id="forest-calm", name="Forest Calm",
                colors=("#14532D", "#4D7C0F", "#A3E635", "#F0FDF4")),
    ColorScheme(id="midnight-neon", name="Midnight Neon",
                colors=("#0B1120", "#7C3AED", "#EC4899", "#22D3EE")),
    ColorScheme(id="monochrome", name="Monochrome",
                colors=("#000000", "#404040", "#A3A3A3", "#FFFFFF")),
)

DEFAULT_VISUAL_STYLES: Tuple[VisualStyle, ...] = (
    VisualStyle(id="flat-minimal", name="Flat Minimal",
                description="flat vector illustration, minimal shapes, generous whitespace, no gradients"),
    VisualStyle(id="3d-render", name="3D Render",
                description="soft 3D render, clay-like materials, studio lighting, subtle shadows"),
    VisualStyle(id="hand-drawn", name="Hand Drawn",
                description="hand-drawn ink and marker illustration, visible strokes, playful imperfection"),
    VisualStyle(id="photorealistic", name="Photorealistic",
                description="photorealistic, shallow depth of field, natural light, high detail"),
    VisualStyle(id="isometric", name="Isometric",
                description="clean isometric illustration, 30-degree grid, crisp edges, consistent lighting"),
)

DEFAULT_GRAPHIC_TYPES: Tuple[GraphicType, ...] = (
    GraphicType(id="social-post", name="social media post"),
    GraphicType(id="logo", name="logo"),
    GraphicType(id="banner", name="web banner"),
    GraphicType(id="icon", name="app icon"),
    GraphicType(id="illustration", name="editorial illustration"),
    GraphicType(id="infographic", name="infographic"),
)

DEFAULT_ASPECT_RATIOS: Tuple[AspectRatioOption, ...] = (
    AspectRatioOption(id="1:1", name="Square (1:1)"),
    AspectRatioOption(id="16:9", name="Landscape (16:9)"),
    AspectRatioOption(id="9:16", name="Portrait (9:16)"),
    AspectRatioOption(id="4:3", name="Standard (4:3)"),
    AspectRatioOption(id="3:4", name="Tall (3:4)"),
)


# ── Catalog containers ───────────────────────────────────────────────────────

T = TypeVar("T", ColorScheme, VisualStyle, GraphicType, AspectRatioOption)


def find_option(entries, option_id: str):
    """Return the first entry whose id matches, or None."""
    for entry in entries:
        if entry.id == option_id:
            return entry
    return None


class OptionCatalog(Generic[T]):
    """Ordered collection of one option kind with unique ids."""

    def __init__(self, kind: str, entries=()):
        self.kind = kind
        self._entries: Dict[str, T] = {}
        for entry in entries:
            self.add(entry)

    def __iter__(self) -> Iterator[T]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, option_id: object) -> bool:
        return option_id in self._entries

    def ids(self) -> List[str]:
        return list(self._entries)

    def get(self, option_id: str) -> Optional[T]:
        return self._entries.get(option_id)

    def first(self) -> Optional[T]:
        return next(iter(self._entries.values()), None)

    def add(self, entry: T) -> T:
        if entry.id in self._entries:
            raise DuplicateOptionError(self.kind, entry.id)
        self._entries[entry.id] = entry
        return entry

    def remove(self, option_id: str) -> T:
        try:
            return self._entries.pop(option_id)
        except KeyError:
            raise UnknownOptionError(self.kind, option_id) from None

    def unique_id(self, name: str) -> str:
        """Slug of name that does not collide with an existing id."""
        base = _slugify(name) or self.kind.replace(" ", "-")
        candidate, n = base, 2
        while candidate in self._entries:
            candidate = f"{base}-{n}"
            n += 1
        return candidate

    def snapshot(self) -> Tuple[T, ...]:
        return tuple(self._entries.values())


@dataclass(frozen=True)
class GenerationContext:
    """Read-only bundle of the four catalogs, taken at request time."""
    color_schemes: Tuple[ColorScheme, ...] = ()
    visual_styles: Tuple[VisualStyle, ...] = ()
    graphic_types: Tuple[GraphicType, ...] = ()
    aspect_ratios: Tuple[AspectRatioOption, ...] = ()

    def color_scheme(self, option_id: str) -> Optional[ColorScheme]:
        return find_option(self.color_schemes, option_id)

    def visual_style(self, option_id: str) -> Optional[VisualStyle]:
        return find_option(self.visual_styles, option_id)

    def graphic_type(self, option_id: str) -> Optional[GraphicType]:
        return find_option(self.graphic_types, option_id)

    def aspect_ratio(self, option_id: str) -> Optional[AspectRatioOption]:
        return find_option(self.aspect_ratios, option_id)


class OptionCatalogs:
    """The mutable, studio-owned set of catalogs, seeded with the presets."""

    def __init__(
        self,
        color_schemes=DEFAULT_COLOR_SCHEMES,
        visual_styles=DEFAULT_VISUAL_STYLES,
        graphic_types=DEFAULT_GRAPHIC_TYPES,
        aspect_ratios=DEFAULT_ASPECT_RATIOS,
    ):
        self.color_schemes: OptionCatalog[ColorScheme] = OptionCatalog("color scheme", color_schemes)
        self.visual_styles: OptionCatalog[VisualStyle] = OptionCatalog("visual style", visual_styles)
        self.graphic_types: OptionCatalog[GraphicType] = OptionCatalog("graphic type", graphic_types)
        self.aspect_ratios: OptionCatalog[AspectRatioOption] = OptionCatalog("aspect ratio", aspect_ratios)

    def snapshot(self) -> GenerationContext:
        return GenerationContext(
            color_schemes=self.color_schemes.snapshot(),
            visual_styles=self.visual_styles.snapshot(),
            graphic_types=self.graphic_types.snapshot(),
            aspect_ratios=self.aspect_ratios.snapshot(),
        )


def parse_color_scheme_arg(value: str, make_id: Callable[[str], str]) -> ColorScheme:
    """
    Parse a 'Name=#hex,#hex,...' string into a ColorScheme.

    The id comes from make_id(name) so callers can keep it unique.
    """
    name, sep, raw_colors = value.partition("=")
    if not sep or not name.strip():
        raise ValueError(f"Expected 'Name=#hex,#hex', got {value!r}")
    colors = tuple(c.strip() for c in raw_colors.split(",") if c.strip())
    if not colors:
        raise ValueError(f"No colors given for scheme {name.strip()!r}")
    bad = [c for c in colors if not _HEX_RE.match(c)]
    if bad:
        raise ValueError(f"Not a hex color: {', '.join(bad)}")
    return ColorScheme(id=make_id(name.strip()), name=name.strip(), colors=colors)


_HEX_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def _slugify(text: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")[:30]

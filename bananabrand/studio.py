"""
Studio: session state for one user working on one graphic.

Holds what the front end shows: the current selections, the current image,
whether a request is running, and the last error message. Requests go
through the GeminiGraphicClient with a catalog snapshot taken at call time.

Rules:
  - at most one request in flight (a second one raises RequestInFlightError)
  - a failed request keeps the previous image and records the error message
  - the in-progress flag is always cleared when a request settles
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .catalog import AspectRatioOption, ColorScheme, GraphicType, OptionCatalogs, VisualStyle
from .errors import BananaBrandError, RequestInFlightError, UnknownOptionError
from .export import save_image
from .generator import GeminiGraphicClient
from .models import GeneratedImage, GenerationConfig

logger = logging.getLogger(__name__)


def default_config(catalogs: OptionCatalogs, prompt: str = "") -> GenerationConfig:
    """Config selecting the first entry of every catalog."""
    def _first_id(catalog) -> str:
        entry = catalog.first()
        return entry.id if entry else ""

    return GenerationConfig(
        prompt=prompt,
        color_scheme_id=_first_id(catalogs.color_schemes),
        visual_style_id=_first_id(catalogs.visual_styles),
        graphic_type_id=_first_id(catalogs.graphic_types),
        aspect_ratio=_first_id(catalogs.aspect_ratios) or "1:1",
    )


class Studio:
    def __init__(
        self,
        client: GeminiGraphicClient,
        catalogs: Optional[OptionCatalogs] = None,
        config: Optional[GenerationConfig] = None,
    ):
        self.client = client
        self.catalogs = catalogs if catalogs is not None else OptionCatalogs()
        self.config = config if config is not None else default_config(self.catalogs)
        self.current_image: Optional[GeneratedImage] = None
        self.is_generating = False
        self.error: Optional[str] = None

    # ── Selections ───────────────────────────────────────────────────────────

    def set_prompt(self, prompt: str) -> GenerationConfig:
        self.config = self.config.with_changes(prompt=prompt)
        return self.config

    def select(
        self,
        color_scheme_id: Optional[str] = None,
        visual_style_id: Optional[str] = None,
        graphic_type_id: Optional[str] = None,
        aspect_ratio: Optional[str] = None,
    ) -> GenerationConfig:
        """Change selections; every id must exist in its catalog."""
        checks = (
            ("color_scheme_id", color_scheme_id, self.catalogs.color_schemes),
            ("visual_style_id", visual_style_id, self.catalogs.visual_styles),
            ("graphic_type_id", graphic_type_id, self.catalogs.graphic_types),
            ("aspect_ratio", aspect_ratio, self.catalogs.aspect_ratios),
        )
        changes = {}
        for field_name, option_id, catalog in checks:
            if option_id is None:
                continue
            if option_id not in catalog:
                raise UnknownOptionError(catalog.kind, option_id)
            changes[field_name] = option_id
        if changes:
            self.config = self.config.with_changes(**changes)
        return self.config

    # ── Catalog edits ────────────────────────────────────────────────────────

    def add_color_scheme(self, name: str, colors) -> ColorScheme:
        catalog = self.catalogs.color_schemes
        return catalog.add(ColorScheme(id=catalog.unique_id(name), name=name, colors=tuple(colors)))

    def add_visual_style(self, name: str, description: str) -> VisualStyle:
        catalog = self.catalogs.visual_styles
        return catalog.add(VisualStyle(id=catalog.unique_id(name), name=name, description=description))

    def add_graphic_type(self, name: str) -> GraphicType:
        catalog = self.catalogs.graphic_types
        return catalog.add(GraphicType(id=catalog.unique_id(name), name=name))

    def add_aspect_ratio(self, ratio: str, label: str = "") -> AspectRatioOption:
        return self.catalogs.aspect_ratios.add(AspectRatioOption(id=ratio, name=label or ratio))

    # ── Requests ─────────────────────────────────────────────────────────────

    def clear_error(self) -> None:
        self.error = None

    async def generate(self) -> Optional[GeneratedImage]:
        """Generate from the current config. Returns None on failure (see .error)."""
        if self.is_generating:
            raise RequestInFlightError()

        config, context = self.config, self.catalogs.snapshot()
        self.is_generating = True
        self.error = None
        try:
            result = await self.client.generate(config, context)
        except BananaBrandError as e:
            logger.warning(f"generation failed: {e}")
            self.error = str(e)
            return None
        finally:
            self.is_generating = False

        self.current_image = result
        return result

    async def refine(self, refinement_text: str) -> Optional[GeneratedImage]:
        """Edit the current image. No-op (None) when there is nothing to refine."""
        if self.is_generating:
            raise RequestInFlightError()
        if self.current_image is None:
            logger.info("refine skipped: no current image")
            return None

        image, config, context = self.current_image, self.config, self.catalogs.snapshot()
        self.is_generating = True
        self.error = None
        try:
            result = await self.client.refine(image, refinement_text, config, context)
        except BananaBrandError as e:
            logger.warning(f"refinement failed: {e}")
            self.error = str(e)
            return None
        finally:
            self.is_generating = False

        self.current_image = result
        return result

    def save_current_image(self, output_dir: Path) -> Optional[Path]:
        if self.current_image is None:
            return None
        return save_image(self.current_image, output_dir, name=self.config.prompt)

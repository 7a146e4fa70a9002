"""
Prompt builder: turns a GenerationConfig plus catalog snapshot into the
instruction text sent to the image model.

Both builders are pure: catalogs are read only through the context argument.

Missing catalog entries never raise. Generation substitutes generic
placeholders; refinement leaves the slot empty, since the attached image
already carries the original style and palette.
"""

from __future__ import annotations

from .catalog import GenerationContext
from .models import GeneratedImage, GenerationConfig

FALLBACK_COLORS = "standard colors"
FALLBACK_STYLE = "clean style"
FALLBACK_GRAPHIC_TYPE = "image"

QUALITY_DIRECTIVE = "Ensure the output is high quality and adheres to the style constraints."


def _resolve_colors(config: GenerationConfig, context: GenerationContext, fallback: str) -> str:
    scheme = context.color_scheme(config.color_scheme_id)
    return ", ".join(scheme.colors) if scheme else fallback


def _resolve_style(config: GenerationConfig, context: GenerationContext, fallback: str) -> str:
    style = context.visual_style(config.visual_style_id)
    return style.description if style else fallback


def build_generation_prompt(config: GenerationConfig, context: GenerationContext) -> str:
    colors = _resolve_colors(config, context, FALLBACK_COLORS)
    style_desc = _resolve_style(config, context, FALLBACK_STYLE)
    graphic_type = context.graphic_type(config.graphic_type_id)
    type_name = graphic_type.name if graphic_type else FALLBACK_GRAPHIC_TYPE

    lines = [
        f"Create a {type_name}.",
        f"Visual Style: {style_desc}.",
        f"Color Palette: Strictly use these colors: {colors}.",
        "",
        f"Content Request: {config.prompt}",
        "",
        QUALITY_DIRECTIVE,
    ]
    return "\n".join(lines).strip()


def build_refinement_prompt(
    current_image: GeneratedImage,
    refinement_text: str,
    config: GenerationConfig,
    context: GenerationContext,
) -> str:
    """
    Instruction for editing current_image.

    The image bytes are attached by the client as a separate part; only the
    text is built here. Graphic type plays no part in an edit.
    """
    colors = _resolve_colors(config, context, "")
    style_desc = _resolve_style(config, context, "")

    lines = [
        "Edit this image.",
        f"Request: {refinement_text}.",
        f"Maintain the existing style ({style_desc}) and color palette ({colors}).",
    ]
    return "\n".join(lines).strip()

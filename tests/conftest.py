"""Pytest fixtures and reply builders for the BananaBrand tests."""

import base64
from typing import List, Optional
from unittest.mock import MagicMock

import pytest
from google.genai import types

from bananabrand.catalog import (
    ColorScheme,
    GenerationContext,
    GraphicType,
    AspectRatioOption,
    OptionCatalogs,
    VisualStyle,
)
from bananabrand.generator import GeminiGraphicClient
from bananabrand.models import GeneratedImage, GenerationConfig

PNG_BYTES = b"\x89PNG\r\n\x1a\n-fake-png-body"
PNG_B64 = base64.b64encode(PNG_BYTES).decode("ascii")


def image_part(data: bytes = PNG_BYTES, mime_type: Optional[str] = "image/png") -> types.Part:
    return types.Part(inline_data=types.Blob(data=data, mime_type=mime_type))


def text_part(text: str) -> types.Part:
    return types.Part(text=text)


def make_response(parts: Optional[List[types.Part]] = None, candidates: bool = True) -> types.GenerateContentResponse:
    """Build a reply with one candidate holding the given parts (or none)."""
    if not candidates:
        return types.GenerateContentResponse(candidates=[])
    return types.GenerateContentResponse(
        candidates=[types.Candidate(content=types.Content(role="model", parts=parts or []))]
    )


@pytest.fixture
def context() -> GenerationContext:
    return GenerationContext(
        color_schemes=(
            ColorScheme(id="sunset", name="Sunset", colors=("#FF5733", "#FFC300", "#1B1B1B")),
            ColorScheme(id="ocean", name="Ocean", colors=("#003F5C", "#2F9BD4")),
        ),
        visual_styles=(
            VisualStyle(id="flat", name="Flat", description="flat vector, bold shapes"),
            VisualStyle(id="retro", name="Retro", description="70s print, grainy texture"),
        ),
        graphic_types=(
            GraphicType(id="poster", name="poster"),
            GraphicType(id="logo", name="logo"),
        ),
        aspect_ratios=(
            AspectRatioOption(id="1:1", name="Square"),
            AspectRatioOption(id="16:9", name="Wide"),
        ),
    )


@pytest.fixture
def config() -> GenerationConfig:
    return GenerationConfig(
        prompt="A summer festival announcement with a surfing banana",
        color_scheme_id="sunset",
        visual_style_id="flat",
        graphic_type_id="poster",
        aspect_ratio="16:9",
    )


@pytest.fixture
def current_image() -> GeneratedImage:
    return GeneratedImage(base64_data=PNG_B64, mime_type="image/png")


@pytest.fixture
def mock_genai():
    """Mock genai.Client; generate_content returns a single PNG by default."""
    mock = MagicMock()
    mock.models.generate_content.return_value = make_response([image_part()])
    return mock


@pytest.fixture
def graphic_client(mock_genai) -> GeminiGraphicClient:
    return GeminiGraphicClient(model="test-image-model", client=mock_genai)


@pytest.fixture
def catalogs() -> OptionCatalogs:
    return OptionCatalogs()

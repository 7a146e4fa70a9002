"""
Generator: sends graphic requests to the Gemini image model.

One generate_content call per request, no retries, no model ladder:

  generate()  text part only
  refine()    inline image part (the current image) + text part

The request config carries only the aspect ratio. The SDK call is blocking,
so the async entry points run it in the default thread pool to keep the
event loop free.

Transport failures are wrapped into TransportError with a fixed user-facing
message. Reply problems (no candidates, text refusal, empty content) come
from the extractor and are raised as-is.
"""

from __future__ import annotations

import asyncio
import base64
import logging
from typing import List, Optional

from google import genai
from google.genai import types

from .catalog import GenerationContext
from .errors import InvalidImageError, TransportError
from .extractor import extract_image
from .models import GeneratedImage, GenerationConfig
from .prompts import build_generation_prompt, build_refinement_prompt
from .settings import DEFAULT_MODEL, Settings

logger = logging.getLogger(__name__)


class GeminiGraphicClient:
    """Thin async wrapper around genai.Client for generate / refine."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = DEFAULT_MODEL,
        client: Optional[genai.Client] = None,
    ):
        self.model = model
        self._client = client if client is not None else genai.Client(api_key=api_key)

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiGraphicClient":
        return cls(api_key=settings.require_api_key(), model=settings.model)

    # ── Request assembly ─────────────────────────────────────────────────────

    def _request_config(self, config: GenerationConfig) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            image_config=types.ImageConfig(aspect_ratio=config.aspect_ratio),
        )

    def _call(self, operation: str, parts: List[types.Part], config: GenerationConfig):
        try:
            return self._client.models.generate_content(
                model=self.model,
                contents=parts,
                config=self._request_config(config),
            )
        except Exception as e:
            logger.error(f"Gemini {operation} error ({self.model}): {type(e).__name__}: {e}")
            raise TransportError(operation, model=self.model) from e

    # ── Sync API ─────────────────────────────────────────────────────────────

    def generate_sync(self, config: GenerationConfig, context: GenerationContext) -> GeneratedImage:
        prompt = build_generation_prompt(config, context)
        logger.debug(f"generation prompt:\n{prompt}")
        parts = [types.Part.from_text(text=prompt)]
        response = self._call("generate", parts, config)
        image = extract_image(response)
        logger.info(f"generated {image.mime_type} image ({config.aspect_ratio})")
        return image

    def refine_sync(
        self,
        current_image: GeneratedImage,
        refinement_text: str,
        config: GenerationConfig,
        context: GenerationContext,
    ) -> GeneratedImage:
        prompt = build_refinement_prompt(current_image, refinement_text, config, context)
        logger.debug(f"refinement prompt:\n{prompt}")
        try:
            image_bytes = base64.b64decode(current_image.base64_data, validate=True)
        except ValueError as e:
            raise InvalidImageError(current_image.mime_type) from e
        parts = [
            types.Part.from_bytes(data=image_bytes, mime_type=current_image.mime_type),
            types.Part.from_text(text=prompt),
        ]
        response = self._call("refine", parts, config)
        image = extract_image(response)
        logger.info(f"refined image → {image.mime_type}")
        return image

    # ── Async API ────────────────────────────────────────────────────────────

    async def generate(self, config: GenerationConfig, context: GenerationContext) -> GeneratedImage:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, lambda: self.generate_sync(config, context))

    async def refine(
        self,
        current_image: GeneratedImage,
        refinement_text: str,
        config: GenerationConfig,
        context: GenerationContext,
    ) -> GeneratedImage:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None,
            lambda: self.refine_sync(current_image, refinement_text, config, context),
        )

"""
Request and result models.

GenerationConfig is a snapshot of the user's choices at request time.
GeneratedImage is what a successful generate / refine call returns.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MIME_TYPE = "image/png"


class GenerationConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    prompt: str = ""
    color_scheme_id: str = Field(description="Id into the color scheme catalog")
    visual_style_id: str = Field(description="Id into the visual style catalog")
    graphic_type_id: str = Field(description="Id into the graphic type catalog")
    aspect_ratio: str = Field(default="1:1", description="Ratio value sent as-is, e.g. '16:9'")

    def with_changes(self, **changes) -> "GenerationConfig":
        """Return a new config with the given fields replaced (validated)."""
        return GenerationConfig.model_validate({**self.model_dump(), **changes})


@dataclass(frozen=True)
class GeneratedImage:
    base64_data: str
    mime_type: str = DEFAULT_MIME_TYPE

    @property
    def image_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.base64_data}"

    def image_bytes(self) -> bytes:
        return base64.b64decode(self.base64_data)

    @classmethod
    def from_bytes(cls, data: bytes, mime_type: str = DEFAULT_MIME_TYPE) -> "GeneratedImage":
        return cls(base64.b64encode(data).decode("ascii"), mime_type)

"""
Response extractor: normalizes a Gemini generate_content reply.

A reply can legitimately be one of four shapes:

  NoCandidates: nothing came back at all
  ImageReply: the first candidate carries inline image data
  TextReply: no image, but the model explained itself in text
  BlankReply: a candidate with neither image nor text

classify_reply() returns the shape; extract_image() turns it into a
GeneratedImage or raises the matching error so callers can tell a refusal
apart from an empty reply.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Optional, Union

from .errors import EmptyResponseError, ModelRefusedError, NoImageDataError
from .models import DEFAULT_MIME_TYPE, GeneratedImage


@dataclass(frozen=True)
class NoCandidates:
    pass


@dataclass(frozen=True)
class ImageReply:
    data: str                       # base64 text
    mime_type: Optional[str] = None


@dataclass(frozen=True)
class TextReply:
    text: str


@dataclass(frozen=True)
class BlankReply:
    finish_reason: Optional[str] = None


ReplyShape = Union[NoCandidates, ImageReply, TextReply, BlankReply]


def _encode(data: Union[bytes, str]) -> str:
    # The SDK hands back decoded bytes; raw REST payloads are already base64.
    if isinstance(data, (bytes, bytearray)):
        return base64.b64encode(data).decode("ascii")
    return data


def _finish_reason(candidate) -> Optional[str]:
    reason = getattr(candidate, "finish_reason", None)
    if reason is None:
        return None
    return getattr(reason, "value", None) or str(reason)


def classify_reply(response) -> ReplyShape:
    candidates = getattr(response, "candidates", None)
    if not candidates:
        return NoCandidates()

    candidate = candidates[0]
    content = getattr(candidate, "content", None)
    parts = (getattr(content, "parts", None) or []) if content is not None else []

    for part in parts:
        inline = getattr(part, "inline_data", None)
        if inline is not None and inline.data:
            return ImageReply(data=_encode(inline.data), mime_type=inline.mime_type)

    for part in parts:
        text = getattr(part, "text", None)
        if text:
            return TextReply(text=text)

    return BlankReply(finish_reason=_finish_reason(candidate))


def extract_image(response) -> GeneratedImage:
    shape = classify_reply(response)

    if isinstance(shape, ImageReply):
        return GeneratedImage(
            base64_data=shape.data,
            mime_type=shape.mime_type or DEFAULT_MIME_TYPE,
        )
    if isinstance(shape, TextReply):
        raise ModelRefusedError(shape.text)
    if isinstance(shape, BlankReply):
        raise NoImageDataError(shape.finish_reason)
    if isinstance(shape, NoCandidates):
        raise EmptyResponseError()
    raise TypeError(f"Unhandled reply shape: {shape!r}")

"""
errors.py: Exception types raised by the BananaBrand pipeline.

Every error carries a human-readable message that the CLI / studio shows
as-is, plus an optional details dict for logging.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class BananaBrandError(Exception):
    """Base class for all BananaBrand errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


# ── Reply errors ─────────────────────────────────────────────────────────────

class EmptyResponseError(BananaBrandError):
    """The API returned no candidates."""

    def __init__(self):
        super().__init__("No candidates returned from API.")


class ModelRefusedError(BananaBrandError):
    """The model explained itself in text instead of returning an image."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(
            f"Model returned text instead of image: {text}",
            {"text": text},
        )


class NoImageDataError(BananaBrandError):
    """A candidate came back with neither image nor text content."""

    def __init__(self, finish_reason: Optional[str] = None):
        self.finish_reason = finish_reason
        details = {"finish_reason": finish_reason} if finish_reason else {}
        super().__init__("No image data found in response.", details)


class TransportError(BananaBrandError):
    """The API call itself failed (network, auth, quota...)."""

    def __init__(self, operation: str, model: Optional[str] = None):
        self.operation = operation
        self.model = model
        verb = "refine" if operation == "refine" else "generate"
        details = {"operation": operation}
        if model:
            details["model"] = model
        super().__init__(f"Failed to {verb} image. Please try again.", details)


class InvalidImageError(BananaBrandError):
    """The image to refine does not decode as base64."""

    def __init__(self, mime_type: Optional[str] = None):
        details = {"mime_type": mime_type} if mime_type else {}
        super().__init__("The current image is not valid base64 image data.", details)


# ── Setup / state errors ─────────────────────────────────────────────────────

class ConfigurationError(BananaBrandError):
    """Raised when required settings (API key) are missing."""


class DuplicateOptionError(BananaBrandError):
    def __init__(self, kind: str, option_id: str):
        self.kind = kind
        self.option_id = option_id
        super().__init__(
            f"A {kind} with id '{option_id}' already exists",
            {"kind": kind, "id": option_id},
        )


class UnknownOptionError(BananaBrandError):
    def __init__(self, kind: str, option_id: str):
        self.kind = kind
        self.option_id = option_id
        super().__init__(
            f"No {kind} with id '{option_id}'",
            {"kind": kind, "id": option_id},
        )


class RequestInFlightError(BananaBrandError):
    """A generate/refine call is already running for this studio."""

    def __init__(self):
        super().__init__("A generation request is already in progress.")

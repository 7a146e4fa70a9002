"""BananaBrand: brand-constrained graphic generation with Gemini."""

__version__ = "0.1.0"

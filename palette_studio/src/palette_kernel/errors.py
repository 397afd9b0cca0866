from __future__ import annotations


class PaletteError(Exception):
    pass


class InvalidInputError(PaletteError, ValueError):
    """The source handed to the loader is not an image."""


class DecodeError(PaletteError):
    """The source looked like an image but could not be decoded."""


class ExtractionError(PaletteError, RuntimeError):
    """Pixel access failed while sampling."""


class EmptyPaletteError(PaletteError):
    """Every sampled pixel was filtered out."""

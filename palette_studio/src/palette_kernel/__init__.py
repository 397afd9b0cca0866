from .accessibility import accessibility_report, best_text_color, palette_accessibility
from .config import ExtractionSettings
from .errors import (
    DecodeError,
    EmptyPaletteError,
    ExtractionError,
    InvalidInputError,
    PaletteError,
)
from .export import EXPORT_FORMATS, render_export
from .extract import extract_palette
from .models import (
    AccessibilityReport,
    AccessibilityScore,
    Color,
    ExportArtifact,
    PaletteResult,
    PixelBuffer,
)
from .pipeline import PaletteExtractionPipeline

__all__ = [
    "AccessibilityReport",
    "AccessibilityScore",
    "Color",
    "DecodeError",
    "EXPORT_FORMATS",
    "EmptyPaletteError",
    "ExportArtifact",
    "ExtractionError",
    "ExtractionSettings",
    "InvalidInputError",
    "PaletteError",
    "PaletteExtractionPipeline",
    "PaletteResult",
    "PixelBuffer",
    "accessibility_report",
    "best_text_color",
    "extract_palette",
    "palette_accessibility",
    "render_export",
]

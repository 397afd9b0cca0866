from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from loguru import logger

from .config import ExtractionSettings
from .extract import extract_palette
from .io import image_to_data_url, read_image_rgba
from .models import PaletteResult
from .naming import assign_color_names


class PaletteExtractionPipeline:
    def __init__(
        self,
        settings: ExtractionSettings | None = None,
        embed_image: bool = True,
    ) -> None:
        self.settings = settings or ExtractionSettings()
        self.embed_image = embed_image

    def run(
        self,
        image_path: str | Path,
        color_count: int | None = None,
    ) -> PaletteResult:
        if color_count is None:
            color_count = self.settings.default_color_count

        pixels = read_image_rgba(image_path, timeout=self.settings.http_timeout)
        logger.info(
            f"extracting {color_count} colors from {pixels.width}x{pixels.height} image"
        )

        result = extract_palette(
            pixels,
            color_count=color_count,
            image_data_url=image_to_data_url(pixels) if self.embed_image else None,
            settings=self.settings,
        )

        named_colors = assign_color_names(result.colors)
        logger.info(
            f"dominant color {named_colors[0].hex} ({named_colors[0].percentage}%)"
        )
        return replace(result, colors=named_colors, dominant_color=named_colors[0])

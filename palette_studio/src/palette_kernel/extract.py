from __future__ import annotations

import math

import numpy as np
from loguru import logger
from PIL import Image

from .config import ExtractionSettings
from .convert import rgb_to_hex, rgb_to_hsl, round_half_up
from .errors import EmptyPaletteError, ExtractionError
from .models import Color, PaletteResult, PixelBuffer


def sampling_stride(width: int, height: int, sample_target: int = 1000) -> int:
    return max(1, int(math.floor(math.sqrt((width * height) / sample_target))))


def extract_palette(
    pixels: PixelBuffer | np.ndarray | Image.Image,
    color_count: int = 5,
    image_data_url: str | None = None,
    settings: ExtractionSettings | None = None,
) -> PaletteResult:
    """Rank the most frequent sampled colors of a decoded image.

    Raises ``ExtractionError`` when the pixels cannot be read and
    ``EmptyPaletteError`` when every sampled pixel was filtered out.
    """
    if color_count < 1:
        raise ValueError("color_count must be at least 1")

    try:
        buffer = _as_pixel_buffer(pixels)
        colors = sample_colors(buffer, color_count=color_count, settings=settings)
    except (ValueError, TypeError, IndexError) as exc:
        raise ExtractionError("failed to extract colors from image") from exc

    if not colors:
        raise EmptyPaletteError(
            "no usable pixels: every sampled pixel was transparent, near-white or near-black"
        )

    return PaletteResult(
        colors=colors,
        dominant_color=colors[0],
        image_data_url=image_data_url,
    )


def sample_colors(
    pixels: PixelBuffer | np.ndarray,
    color_count: int = 5,
    settings: ExtractionSettings | None = None,
) -> list[Color]:
    settings = settings or ExtractionSettings()
    buffer = _as_pixel_buffer(pixels)

    stride = sampling_stride(buffer.width, buffer.height, settings.sample_target)
    sampled = buffer.rgba.reshape(-1, 4)[::stride].astype(np.int32)

    # Mean brightness compared on the channel sum to stay in integers.
    channel_sum = sampled[:, :3].sum(axis=1)
    keep = (
        (sampled[:, 3] >= settings.min_alpha)
        & (channel_sum <= 3 * settings.max_brightness)
        & (channel_sum >= 3 * settings.min_brightness)
    )
    survivors = sampled[keep]
    logger.debug(
        f"sampled {sampled.shape[0]} pixels with stride {stride}, "
        f"{survivors.shape[0]} survived filtering"
    )

    total = int(survivors.shape[0])
    if total == 0:
        return []

    codes = (survivors[:, 0] << 16) | (survivors[:, 1] << 8) | survivors[:, 2]
    unique_codes, first_seen, counts = np.unique(
        codes, return_index=True, return_counts=True
    )
    # Count descending, ties in first-seen order.
    order = np.lexsort((first_seen, -counts))
    if unique_codes.shape[0] < color_count:
        logger.warning(
            f"requested {color_count} colors but only {unique_codes.shape[0]} distinct colors survived"
        )

    colors: list[Color] = []
    for idx in order[:color_count]:
        code = int(unique_codes[idx])
        rgb = ((code >> 16) & 0xFF, (code >> 8) & 0xFF, code & 0xFF)
        colors.append(
            Color(
                hex=rgb_to_hex(*rgb),
                rgb=rgb,
                hsl=rgb_to_hsl(*rgb),
                percentage=int(round_half_up(int(counts[idx]) / total * 100.0)),
            )
        )
    return colors


def _as_pixel_buffer(pixels: PixelBuffer | np.ndarray | Image.Image) -> PixelBuffer:
    if isinstance(pixels, PixelBuffer):
        return pixels
    if isinstance(pixels, Image.Image):
        return PixelBuffer.from_image(pixels)
    return PixelBuffer.from_array(pixels)

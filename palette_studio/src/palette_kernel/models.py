from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from PIL import Image

from .convert import HSL, RGB, hex_to_rgb, rgb_to_hex, rgb_to_hsl


@dataclass(frozen=True)
class Color:
    hex: str
    rgb: RGB
    hsl: HSL
    name: str | None = None
    percentage: int | None = None

    @classmethod
    def from_hex(
        cls, value: str, percentage: int | None = None, name: str | None = None
    ) -> Color:
        rgb = hex_to_rgb(value)
        return cls(
            hex=rgb_to_hex(*rgb),
            rgb=rgb,
            hsl=rgb_to_hsl(*rgb),
            name=name,
            percentage=percentage,
        )

    def to_dict(self) -> dict[str, Any]:
        r, g, b = self.rgb
        hue, saturation, lightness = self.hsl
        return {
            "hex": self.hex,
            "rgb": {"r": r, "g": g, "b": b},
            "hsl": {"h": hue, "s": saturation, "l": lightness},
            "name": self.name,
            "percentage": self.percentage,
        }


@dataclass(frozen=True)
class PaletteResult:
    colors: list[Color]
    dominant_color: Color
    image_data_url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "colors": [color.to_dict() for color in self.colors],
            "dominant_color": self.dominant_color.to_dict(),
            "image_data_url": self.image_data_url,
        }


@dataclass(frozen=True)
class AccessibilityScore:
    contrast: float
    wcag: str
    readable: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "contrast": float(self.contrast),
            "wcag": self.wcag,
            "readable": self.readable,
        }


@dataclass(frozen=True)
class AccessibilityReport:
    scores: list[AccessibilityScore]
    average_contrast: float
    all_wcag_aa: bool
    all_wcag_aaa: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "scores": [score.to_dict() for score in self.scores],
            "average_contrast": float(self.average_contrast),
            "all_wcag_aa": self.all_wcag_aa,
            "all_wcag_aaa": self.all_wcag_aaa,
        }


@dataclass(frozen=True)
class PixelBuffer:
    """Decoded RGBA pixels, ``rgba`` has shape ``(height, width, 4)``."""

    width: int
    height: int
    rgba: np.ndarray

    @classmethod
    def from_array(cls, array: np.ndarray) -> PixelBuffer:
        pixels = np.asarray(array)
        if pixels.ndim != 3 or pixels.shape[2] not in (3, 4):
            raise ValueError(
                f"expected an (height, width, 3|4) pixel array, got shape {pixels.shape}"
            )

        pixels = pixels.astype(np.uint8, copy=False)
        if pixels.shape[2] == 3:
            alpha = np.full(pixels.shape[:2] + (1,), 255, dtype=np.uint8)
            pixels = np.concatenate([pixels, alpha], axis=2)

        height, width = pixels.shape[:2]
        return cls(width=int(width), height=int(height), rgba=pixels)

    @classmethod
    def from_image(cls, image: Image.Image) -> PixelBuffer:
        rgba = image.convert("RGBA")
        return cls.from_array(np.asarray(rgba, dtype=np.uint8))


@dataclass(frozen=True)
class ExportArtifact:
    filename: str
    content_type: str
    data: bytes

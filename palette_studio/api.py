from __future__ import annotations

from typing import Annotated

import requests
from fastapi import FastAPI, HTTPException, Response
from pydantic import BaseModel, Field
from starlette.concurrency import run_in_threadpool

from palette_studio.src.palette_kernel.accessibility import accessibility_report
from palette_studio.src.palette_kernel.config import ExtractionSettings
from palette_studio.src.palette_kernel.errors import (
    DecodeError,
    EmptyPaletteError,
    ExtractionError,
    InvalidInputError,
)
from palette_studio.src.palette_kernel.export import render_export
from palette_studio.src.palette_kernel.models import Color
from palette_studio.src.palette_kernel.pipeline import PaletteExtractionPipeline

HEX_PATTERN = r"^#?[0-9A-Fa-f]{6}$"


class ExtractRequest(BaseModel):
    image_url: str = Field(..., description="HTTP(S) image URL")
    color_count: int = Field(default=5, ge=1, le=20, description="Colors to return")


class ColorItem(BaseModel):
    hex: str
    rgb: list[int]
    hsl: list[int]
    name: str | None
    percentage: int | None


class ScoreItem(BaseModel):
    contrast: float
    wcag: str
    readable: bool


class AccessibilityItem(BaseModel):
    scores: list[ScoreItem]
    average_contrast: float
    all_wcag_aa: bool
    all_wcag_aaa: bool


class ExtractResponse(BaseModel):
    colors: list[ColorItem]
    dominant_color: ColorItem
    accessibility: AccessibilityItem


class ExportRequest(BaseModel):
    colors: list[Annotated[str, Field(pattern=HEX_PATTERN)]] = Field(
        ..., min_length=1, description="Palette as ordered hex codes"
    )
    format: str = Field(..., description="json, css, scss, tailwind, svg, png, html or ase")
    image_src: str | None = Field(
        default=None, description="Optional image URL embedded in the html export"
    )


app = FastAPI(
    title="Palette Studio API",
    version="1.0.0",
    description="Extract accessible color palettes from images and export them.",
)

_ERROR_STATUS: dict[type[Exception], tuple[int, str]] = {
    InvalidInputError: (400, "invalid_input"),
    DecodeError: (422, "decode_failed"),
    EmptyPaletteError: (422, "empty_palette"),
    ExtractionError: (500, "failed_to_extract_colors"),
    requests.RequestException: (400, "image_fetch_failed"),
}


def _build_pipeline() -> PaletteExtractionPipeline:
    return PaletteExtractionPipeline(
        settings=ExtractionSettings.from_env(), embed_image=False
    )


def _color_item(color: Color) -> ColorItem:
    return ColorItem(
        hex=color.hex,
        rgb=list(color.rgb),
        hsl=list(color.hsl),
        name=color.name,
        percentage=color.percentage,
    )


@app.post("/extract", response_model=ExtractResponse)
async def extract_colors(payload: ExtractRequest) -> ExtractResponse:
    pipeline = _build_pipeline()
    try:
        result = await run_in_threadpool(
            pipeline.run, payload.image_url, payload.color_count
        )
    except tuple(_ERROR_STATUS) as exc:
        status_code, code = next(
            value for kind, value in _ERROR_STATUS.items() if isinstance(exc, kind)
        )
        raise HTTPException(status_code=status_code, detail=f"{code}: {exc}") from exc

    report = accessibility_report(result.colors)
    return ExtractResponse(
        colors=[_color_item(color) for color in result.colors],
        dominant_color=_color_item(result.dominant_color),
        accessibility=AccessibilityItem(
            scores=[ScoreItem(**score.to_dict()) for score in report.scores],
            average_contrast=report.average_contrast,
            all_wcag_aa=report.all_wcag_aa,
            all_wcag_aaa=report.all_wcag_aaa,
        ),
    )


@app.post("/export")
async def export_palette(payload: ExportRequest) -> Response:
    colors = [Color.from_hex(value) for value in payload.colors]

    try:
        artifact = render_export(payload.format, colors, image_src=payload.image_src)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"invalid_format: {exc}") from exc

    return Response(
        content=artifact.data,
        media_type=artifact.content_type,
        headers={"Content-Disposition": f'attachment; filename="{artifact.filename}"'},
    )

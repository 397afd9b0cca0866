from __future__ import annotations

import base64
import io
from pathlib import Path

import requests
from loguru import logger
from PIL import Image, UnidentifiedImageError

from .errors import DecodeError, InvalidInputError
from .models import ExportArtifact, PixelBuffer


def _open_image(image_path: str | Path, timeout: float) -> Image.Image:
    path_str = str(image_path)
    if path_str.startswith(("http://", "https://")):
        response = requests.get(path_str, timeout=timeout)
        response.raise_for_status()
        source: io.BytesIO | Path = io.BytesIO(response.content)
    else:
        source = Path(image_path)
        if not source.is_file():
            raise InvalidInputError(f"image file does not exist: {source}")

    try:
        image = Image.open(source)
    except UnidentifiedImageError as exc:
        raise InvalidInputError(f"not a valid image file: {path_str}") from exc

    try:
        image.load()
    except OSError as exc:
        image.close()
        raise DecodeError(f"failed to decode image: {path_str}") from exc
    return image


def read_image_rgba(image_path: str | Path, timeout: float = 10) -> PixelBuffer:
    with _open_image(image_path, timeout) as image:
        logger.debug(f"decoded {image.format} image {image.size[0]}x{image.size[1]}")
        return PixelBuffer.from_image(image)


def image_to_data_url(pixels: PixelBuffer) -> str:
    image = Image.fromarray(pixels.rgba)
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    encoded = base64.b64encode(buffer.getvalue()).decode("ascii")
    return f"data:image/png;base64,{encoded}"


def write_artifact(artifact: ExportArtifact, out_dir: str | Path) -> Path:
    path = Path(out_dir) / artifact.filename
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(artifact.data)
    return path

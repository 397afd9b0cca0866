from __future__ import annotations

import html
import io
import json
import struct
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone

from PIL import Image, ImageDraw, ImageFont

from .models import Color, ExportArtifact

ASE_SIGNATURE = b"ASEF"
ASE_VERSION = (1, 0)
ASE_COLOR_ENTRY = 0x0001
ASE_BLOCK_LENGTH = 20
ASE_GLOBAL_COLOR = 0x0000

SVG_SWATCH_SIZE = 100
SVG_HEIGHT = 150

PNG_SWATCH_PITCH = 120
PNG_SWATCH_GAP = 10
PNG_SWATCH_HEIGHT = 80
PNG_LABEL_HEIGHT = 40
PNG_PADDING = 20
PNG_BORDER = "#CCCCCC"


def _require_colors(colors: list[Color]) -> None:
    if not colors:
        raise ValueError("palette must contain at least one color")


def export_json(colors: list[Color], exported_at: datetime | None = None) -> str:
    _require_colors(colors)
    exported_at = exported_at or datetime.now(timezone.utc)
    payload = {
        "colors": [
            {
                "hex": color.hex,
                "rgb": {"r": color.rgb[0], "g": color.rgb[1], "b": color.rgb[2]},
                "hsl": {"h": color.hsl[0], "s": color.hsl[1], "l": color.hsl[2]},
                "percentage": color.percentage,
            }
            for color in colors
        ],
        "exportedAt": exported_at.isoformat(),
    }
    return json.dumps(payload, indent=2)


def export_css(colors: list[Color]) -> str:
    _require_colors(colors)
    lines = [":root {"]
    lines.extend(
        f"  --color-{index}: {color.hex};" for index, color in enumerate(colors, start=1)
    )
    lines.append("}")
    return "\n".join(lines) + "\n"


def export_scss(colors: list[Color]) -> str:
    _require_colors(colors)
    return "".join(
        f"$color-{index}: {color.hex};\n" for index, color in enumerate(colors, start=1)
    )


def export_tailwind(colors: list[Color]) -> str:
    _require_colors(colors)
    entries = "\n".join(
        f"        'palette-{index}': '{color.hex}',"
        for index, color in enumerate(colors, start=1)
    )
    return (
        "module.exports = {\n"
        "  theme: {\n"
        "    extend: {\n"
        "      colors: {\n"
        f"{entries}\n"
        "      }\n"
        "    }\n"
        "  }\n"
        "}\n"
    )


def export_svg(colors: list[Color]) -> str:
    _require_colors(colors)
    width = len(colors) * SVG_SWATCH_SIZE
    parts = [
        f'<svg width="{width}" height="{SVG_HEIGHT}" xmlns="http://www.w3.org/2000/svg">'
    ]
    for index, color in enumerate(colors):
        x = index * SVG_SWATCH_SIZE
        parts.append(
            f'  <rect x="{x}" y="0" width="{SVG_SWATCH_SIZE}" height="100" '
            f'fill="{color.hex}" stroke="#ccc" stroke-width="1"/>'
        )
        parts.append(
            f'  <text x="{x + SVG_SWATCH_SIZE // 2}" y="125" text-anchor="middle" '
            f'font-size="12" font-family="Arial">{color.hex}</text>'
        )
    parts.append("</svg>")
    return "\n".join(parts) + "\n"


def _label_font() -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
    try:
        return ImageFont.truetype("DejaVuSans-Bold.ttf", 12)
    except OSError:
        return ImageFont.load_default()


def export_png(colors: list[Color]) -> bytes:
    """Render the palette as a row of bordered swatches with hex labels."""
    _require_colors(colors)
    width = len(colors) * PNG_SWATCH_PITCH + PNG_PADDING * 2
    height = PNG_SWATCH_HEIGHT + PNG_LABEL_HEIGHT + PNG_PADDING * 2
    swatch_width = PNG_SWATCH_PITCH - PNG_SWATCH_GAP

    canvas = Image.new("RGB", (width, height), "#FFFFFF")
    draw = ImageDraw.Draw(canvas)
    font = _label_font()

    for index, color in enumerate(colors):
        x = PNG_PADDING + index * PNG_SWATCH_PITCH
        y = PNG_PADDING
        draw.rectangle(
            [x, y, x + swatch_width - 1, y + PNG_SWATCH_HEIGHT - 1],
            fill=color.rgb,
            outline=PNG_BORDER,
            width=1,
        )

        left, top, right, bottom = draw.textbbox((0, 0), color.hex, font=font)
        text_x = x + (swatch_width - (right - left)) / 2 - left
        # Baseline sits 25px under the swatch.
        text_y = y + PNG_SWATCH_HEIGHT + 25 - bottom
        draw.text((text_x, text_y), color.hex, fill="#000000", font=font)

    buffer = io.BytesIO()
    canvas.save(buffer, format="PNG")
    return buffer.getvalue()


_HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Color Palette</title>
  <style>
    * {{ margin: 0; padding: 0; box-sizing: border-box; }}
    body {{
      font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
      background: #f5f5f5;
      padding: 20px;
    }}
    .container {{
      max-width: 1000px;
      margin: 0 auto;
      background: white;
      border-radius: 8px;
      overflow: hidden;
      box-shadow: 0 2px 8px rgba(0,0,0,0.1);
    }}
    .header {{
      padding: 30px;
      text-align: center;
      background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
      color: white;
    }}
    .header h1 {{ font-size: 32px; margin-bottom: 10px; }}
    .image-section {{ padding: 20px 30px; text-align: center; }}
    .image-section img {{
      max-width: 100%;
      max-height: 400px;
      border-radius: 8px;
      box-shadow: 0 2px 8px rgba(0,0,0,0.1);
    }}
    .palette-section {{ padding: 30px; }}
    .palette-grid {{
      display: grid;
      grid-template-columns: repeat(auto-fit, minmax(150px, 1fr));
      gap: 20px;
    }}
    .color-card {{
      border-radius: 8px;
      overflow: hidden;
      box-shadow: 0 2px 8px rgba(0,0,0,0.1);
    }}
    .color-swatch {{ height: 150px; }}
    .color-info {{ padding: 12px; background: #f9f9f9; border-top: 1px solid #eee; }}
    .color-hex {{
      font-family: 'Courier New', monospace;
      font-weight: bold;
      font-size: 14px;
      margin-bottom: 6px;
    }}
    .color-percentage {{ font-size: 12px; color: #666; }}
    .footer {{
      padding: 20px 30px;
      border-top: 1px solid #eee;
      text-align: center;
      color: #666;
      font-size: 12px;
    }}
  </style>
</head>
<body>
  <div class="container">
    <div class="header">
      <h1>Color Palette</h1>
      <p>Extracted palette colors</p>
    </div>
{image_section}    <div class="palette-section">
      <div class="palette-grid">
{cards}
      </div>
    </div>
    <div class="footer">
      <p>Generated on {generated_at}</p>
    </div>
  </div>
</body>
</html>
"""

_HTML_CARD = """        <div class="color-card">
          <div class="color-swatch" style="background-color: {hex}"></div>
          <div class="color-info">
            <div class="color-hex">{hex}</div>
            <div class="color-percentage">{percentage}%</div>
          </div>
        </div>"""


def export_html(
    colors: list[Color],
    image_src: str | None = None,
    generated_at: datetime | None = None,
) -> str:
    _require_colors(colors)
    generated_at = generated_at or datetime.now(timezone.utc)

    image_section = ""
    if image_src:
        image_section = (
            '    <div class="image-section">'
            f'<img src="{html.escape(image_src, quote=True)}" alt="Source image">'
            "</div>\n"
        )

    cards = "\n".join(
        _HTML_CARD.format(
            hex=html.escape(color.hex),
            percentage=color.percentage or 0,
        )
        for color in colors
    )
    return _HTML_TEMPLATE.format(
        image_section=image_section,
        cards=cards,
        generated_at=generated_at.strftime("%Y-%m-%d %H:%M:%S %Z").strip(),
    )


def export_ase(colors: list[Color]) -> bytes:
    """Encode an Adobe Swatch Exchange buffer of exactly ``12 + 20 * n`` bytes."""
    _require_colors(colors)
    chunks = [
        ASE_SIGNATURE,
        struct.pack(">HHI", ASE_VERSION[0], ASE_VERSION[1], len(colors)),
    ]
    for color in colors:
        r, g, b = color.rgb
        chunks.append(
            struct.pack(
                ">HIfffH",
                ASE_COLOR_ENTRY,
                ASE_BLOCK_LENGTH,
                r / 255.0,
                g / 255.0,
                b / 255.0,
                ASE_GLOBAL_COLOR,
            )
        )
    return b"".join(chunks)


@dataclass(frozen=True)
class ExportFormat:
    extension: str
    content_type: str
    encoder: Callable[..., str | bytes]
    accepts_image: bool = False


EXPORT_FORMATS: dict[str, ExportFormat] = {
    "json": ExportFormat(".json", "application/json", export_json),
    "css": ExportFormat(".css", "text/css", export_css),
    "scss": ExportFormat(".scss", "text/x-scss", export_scss),
    "tailwind": ExportFormat(".js", "text/javascript", export_tailwind),
    "svg": ExportFormat(".svg", "image/svg+xml", export_svg),
    "png": ExportFormat(".png", "image/png", export_png),
    "html": ExportFormat(".html", "text/html", export_html, accepts_image=True),
    "ase": ExportFormat(".ase", "application/octet-stream", export_ase),
}


def render_export(
    format_name: str,
    colors: list[Color],
    image_src: str | None = None,
    basename: str = "color-palette",
) -> ExportArtifact:
    fmt = EXPORT_FORMATS.get(format_name.lower())
    if fmt is None:
        raise ValueError(
            f"unsupported export format '{format_name}'. "
            f"Use one of: {', '.join(EXPORT_FORMATS)}"
        )

    if fmt.accepts_image:
        payload = fmt.encoder(colors, image_src=image_src)
    else:
        payload = fmt.encoder(colors)
    data = payload.encode("utf-8") if isinstance(payload, str) else payload

    stem = "tailwind-colors" if format_name.lower() == "tailwind" else basename
    return ExportArtifact(
        filename=f"{stem}{fmt.extension}",
        content_type=fmt.content_type,
        data=data,
    )

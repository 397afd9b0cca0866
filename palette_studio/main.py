from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from palette_studio.src.palette_kernel.accessibility import accessibility_report
from palette_studio.src.palette_kernel.config import LOG_LEVEL, ExtractionSettings
from palette_studio.src.palette_kernel.errors import PaletteError
from palette_studio.src.palette_kernel.export import EXPORT_FORMATS, render_export
from palette_studio.src.palette_kernel.io import write_artifact
from palette_studio.src.palette_kernel.log import configure_logging
from palette_studio.src.palette_kernel.palette import (
    PaletteValidationError,
    load_palette_json,
)
from palette_studio.src.palette_kernel.pipeline import PaletteExtractionPipeline


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="palette-studio",
        description="Extract an accessible color palette from an image and export it.",
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        help="Log level for stderr output (default: PALETTE_LOG_LEVEL or WARNING).",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    extract = subparsers.add_parser(
        "extract",
        help="Extract the dominant colors of an image and score their contrast.",
    )
    extract.add_argument(
        "--image", required=True, help="Path or URL to the input image."
    )
    extract.add_argument(
        "--colors",
        type=int,
        default=None,
        help="Number of colors to extract (default: PALETTE_COLOR_COUNT or 5).",
    )
    extract.add_argument(
        "--format",
        action="append",
        default=[],
        choices=sorted(EXPORT_FORMATS),
        help="Export format to write into --out-dir. May be repeated.",
    )
    extract.add_argument(
        "--out-dir",
        default=".",
        help="Directory for exported files.",
    )
    extract.add_argument(
        "--out",
        default=None,
        help="Optional JSON output path. If omitted, prints JSON to stdout.",
    )
    extract.add_argument(
        "--no-embed-image",
        action="store_true",
        help="Do not embed the source image in the HTML export.",
    )

    convert = subparsers.add_parser(
        "convert",
        help="Re-encode an exported JSON palette into other formats.",
    )
    convert.add_argument(
        "--palette", required=True, help="Path to a palette exported as JSON."
    )
    convert.add_argument(
        "--format",
        action="append",
        required=True,
        choices=sorted(EXPORT_FORMATS),
        help="Export format to write. May be repeated.",
    )
    convert.add_argument(
        "--out-dir",
        default=".",
        help="Directory for exported files.",
    )

    return parser


def _run_extract(args: argparse.Namespace) -> None:
    settings = ExtractionSettings.from_env()
    pipeline = PaletteExtractionPipeline(
        settings=settings, embed_image=not args.no_embed_image
    )
    result = pipeline.run(args.image, color_count=args.colors)
    report = accessibility_report(result.colors)

    palette = result.to_dict()
    palette.pop("image_data_url")
    payload = json.dumps(
        {"palette": palette, "accessibility": report.to_dict()}, indent=2
    )

    for format_name in args.format:
        artifact = render_export(
            format_name, result.colors, image_src=result.image_data_url
        )
        write_artifact(artifact, args.out_dir)

    if args.out:
        output_path = Path(args.out)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(payload + "\n", encoding="utf-8")
    else:
        print(payload)


def _run_convert(args: argparse.Namespace) -> None:
    colors = load_palette_json(Path(args.palette))
    for format_name in args.format:
        path = write_artifact(render_export(format_name, colors), args.out_dir)
        print(path)


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()
    configure_logging(args.log_level)

    try:
        if args.command == "extract":
            _run_extract(args)
            return
        if args.command == "convert":
            _run_convert(args)
            return
    except (PaletteError, PaletteValidationError) as exc:
        print(f"error: {type(exc).__name__}: {exc}", file=sys.stderr)
        sys.exit(1)

    parser.error("unknown command")


if __name__ == "__main__":
    main()

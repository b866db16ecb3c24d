"""Command line interface: ``img-editor frame`` and ``img-editor resize``."""

import argparse
import asyncio
import glob
import sys
from collections.abc import Sequence

from loguru import logger
from pydantic import ValidationError

from .common.schemas import ProcessingOutcome
from .config import EditorConfig
from .plugins.add_frame.task import AddFrameTask
from .plugins.image_resize.task import ImageResizeTask

EPILOG = "Copyright 2022 - Present"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="img-editor",
        description="Add print frames to images, resize or grayscale them.",
        epilog=EPILOG,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    frame = commands.add_parser(
        "frame",
        help="adds frame to the image",
        epilog="example: img-editor frame -f './photos/*.jpg' -c '#000'",
    )
    frame.add_argument("-f", "--files", required=True, help="files or glob")
    frame.add_argument(
        "-w", "--paperWidth", dest="paper_width", type=float, default=4, help="printing paper width"
    )
    frame.add_argument(
        "-p", "--paperHeight", dest="paper_height", type=float, default=6, help="printing paper height"
    )
    frame.add_argument("-c", "--frameColor", dest="frame_color", default="#fff", help="frame color, i.e. #fff")
    frame.add_argument(
        "--frameWidthFactor",
        dest="frame_width_factor",
        type=float,
        default=0.05,
        help="frame width as a fraction of the smaller image side",
    )
    frame.add_argument("-o", "--output", default=".", help="Output folder")

    resize = commands.add_parser(
        "resize",
        help="regular resize",
        epilog="example: img-editor resize -f ./img.png -w 25 -g",
    )
    resize.add_argument("-f", "--files", required=True, help="file or glob")
    resize.add_argument("-w", "--width", type=int, default=None, help="width of the output image in pixels")
    resize.add_argument("-g", "--grayscale", action="store_true", help="Convert to grayscale")
    resize.add_argument("-o", "--output", default=".", help="Output folder")

    return parser


def configure_logging(verbose: bool) -> None:
    logger.remove()
    _ = logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "INFO",
        format="<level>{level: <8}</level> | {message}",
    )


def expand_files(pattern: str) -> list[str]:
    return sorted(glob.glob(pattern, recursive=True))


def build_config(args: argparse.Namespace) -> EditorConfig:
    if args.command == "frame":
        return EditorConfig(
            output_dir=args.output,
            paper_width=args.paper_width,
            paper_height=args.paper_height,
            frame_color=args.frame_color,
            frame_width_factor=args.frame_width_factor,
        )
    return EditorConfig(
        output_dir=args.output,
        resize_width=args.width,
        grayscale=args.grayscale,
    )


async def run(command: str, files: list[str], config: EditorConfig) -> ProcessingOutcome:
    if command == "frame":
        return await AddFrameTask().execute(files, config.frame_params(), config.output_dir)
    return await ImageResizeTask().execute(files, config.resize_params(), config.output_dir)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = build_config(args)
    except ValidationError as e:
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            logger.error(f"Invalid {field}: {error['msg']}")
        return 1

    files = expand_files(args.files)
    if not files:
        logger.error("No files found")
        return 1

    outcome = asyncio.run(run(args.command, files, config))

    logger.info(f"Done: {outcome.successful} succeeded, {outcome.failed} failed")
    return 0 if outcome.success else 1


if __name__ == "__main__":
    sys.exit(main())

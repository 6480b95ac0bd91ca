#!/usr/bin/env python3
"""
Saddle-Stitch Booklet Maker

Arranges a sequence of images into saddle-stitch print order and lays them
out two per landscape page, ready to print, fold and staple.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Tuple

from saddle_stitch.config import IMAGE_EXTENSIONS, ORIENTATIONS, PAGE_FORMATS, UNIT_TO_POINTS
from saddle_stitch.exceptions import RenderError
from saddle_stitch.imposition import move_item
from saddle_stitch.models import ExportOptions, LengthUnit, Orientation
from saddle_stitch.services import BookletService, ConfigService
from saddle_stitch.validators import InputValidator


def collect_images(inputs: List[str]) -> List[Path]:
    """
    Expand input arguments into an ordered list of image paths.

    Files are kept in the order given; directories contribute their image
    files sorted by name. Hidden files are skipped.

    Args:
        inputs: File and directory paths from the command line

    Returns:
        List of image paths in reading order
    """
    images = []
    for entry in inputs:
        path = Path(entry)
        if path.is_dir():
            images.extend(sorted(
                p for p in path.iterdir()
                if p.is_file()
                and p.suffix.lower() in IMAGE_EXTENSIONS
                and not p.name.startswith('.')
            ))
        else:
            images.append(path)
    return images


def parse_move(value: str) -> Tuple[int, int]:
    """
    Parse a 1-indexed "FROM:TO" move into zero-based indices.

    Examples:
        "3:1" -> (2, 0)
    """
    try:
        source, target = value.split(':')
        return int(source.strip()) - 1, int(target.strip()) - 1
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid move '{value}', expected FROM:TO (e.g. 5:1)")


def build_options(args: argparse.Namespace, saved: ExportOptions) -> ExportOptions:
    """Merge command-line flags over saved options."""
    return ExportOptions(
        page_format=args.page_format or saved.page_format,
        orientation=Orientation(args.orientation) if args.orientation else saved.orientation,
        unit=LengthUnit(args.unit) if args.unit else saved.unit,
        output_name=saved.output_name,
        output_folder=saved.output_folder,
        mark_blanks=args.mark_blanks or saved.mark_blanks,
        max_workers=saved.max_workers
    )


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Arrange images into a saddle-stitch booklet PDF (two pages per sheet).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s page1.jpg page2.jpg page3.jpg page4.jpg
  %(prog)s scans/                                   # All images in a folder, sorted by name
  %(prog)s scans/ --preview                         # Show the print order only
  %(prog)s scans/ --move 8:1                        # Move page 8 to the front
  %(prog)s scans/ -o zine.pdf --page-format letter --unit in
  %(prog)s scans/ --mark-blanks --save-config
        """
    )

    parser.add_argument('inputs', nargs='*', help='Image files or folders, in reading order')
    parser.add_argument('-o', '--output', help='Output PDF path')
    parser.add_argument('--page-format', choices=list(PAGE_FORMATS.keys()),
                        help='Page format (default: a4)')
    parser.add_argument('--orientation', choices=list(ORIENTATIONS),
                        help='Page orientation (default: landscape)')
    parser.add_argument('--unit', choices=list(UNIT_TO_POINTS.keys()),
                        help='Unit for page geometry (default: mm)')
    parser.add_argument('--move', action='append', type=parse_move, default=[],
                        metavar='FROM:TO',
                        help='Move page FROM to position TO before imposing (1-indexed, repeatable)')
    parser.add_argument('--mark-blanks', action='store_true',
                        help='Draw a placeholder frame on blank halves')
    parser.add_argument('--preview', action='store_true',
                        help='Print the sheet order without rendering')
    parser.add_argument('--config', help='Path to config.json')
    parser.add_argument('--save-config', action='store_true',
                        help='Save the effective page settings as defaults')
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose logging')
    return parser


def main(argv: List[str] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s: %(message)s'
    )

    config_service = ConfigService(Path(args.config) if args.config else None)
    try:
        options = build_options(args, config_service.load())
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    if args.save_config:
        config_service.save(options)
        print(f"Saved settings to {config_service.get_config_path()}")

    images = collect_images(args.inputs)

    validation = InputValidator.validate_images(images)
    for warning in validation.warnings:
        print(f"Warning: {warning}")
    for error in validation.errors:
        print(f"Error: {error}")
    if not validation.is_valid:
        return 1

    try:
        for source, target in args.move:
            images = move_item(images, source, target)
    except IndexError as e:
        print(f"Error: Invalid move: {e}")
        return 1

    if not images:
        return 0

    service = BookletService(options)

    if args.preview:
        print(f"\nPrint order ({len(images)} image(s)):\n")
        for line in service.preview(images, namer=lambda p: Path(p).name):
            print(f"  {line}")
        return 0

    try:
        result = service.generate(images, Path(args.output) if args.output else None)
    except RenderError as e:
        print(f"\nError: {e}")
        return 1

    for failure in result.failures:
        print(f"Warning: {failure}")

    print("\nBooklet generation complete!")
    print(f"Pages: {result.page_count}")
    print(f"Output: {result.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

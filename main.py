"""
CLI entry point for Hold Finder.
"""
import argparse
import sys
from pathlib import Path

from holdfinder import (
    HoldLocator, HighlightStyle, Exporter, VoiceAssistant, ConsoleSpeaker, DatasetError,
)
import config


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find climbing holds on the wall and highlight them",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    parser.add_argument(
        "--hold", "-H",
        action="append",
        default=[],
        help="Hold number to look up (repeatable)"
    )

    parser.add_argument(
        "--image", "-i",
        default=str(config.WALL_IMAGE),
        help="Wall photo to draw on (missing file = plain canvas)"
    )

    parser.add_argument(
        "--main-csv",
        default=str(config.MAIN_GRID_CSV),
        help="Main line grid export"
    )

    parser.add_argument(
        "--aux-csv",
        default=str(config.AUX_GRID_CSV),
        help="Aux grid export"
    )

    parser.add_argument(
        "--output", "-o",
        default=str(config.RESULTS_DIR),
        help="Output directory for highlighted images and JSON"
    )

    parser.add_argument(
        "--style",
        choices=[s.value for s in HighlightStyle],
        default=config.HIGHLIGHT_STYLE,
        help="Highlight presentation"
    )

    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Prompt for hold numbers until an empty line or 'q'"
    )

    parser.add_argument(
        "--voice",
        action="store_true",
        help="Read results back as spoken announcements (console speaker)"
    )

    parser.add_argument(
        "--export-all",
        action="store_true",
        help="Resolve every hold in the dataset and write holds.json"
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress progress bar"
    )

    return parser.parse_args(argv)


def print_result(result) -> None:
    if not result.found:
        print(f"  {result.error or 'No hold entered'}")
        return
    fields = result.fields()
    print(f"  Hold {result.hold_id}  ({result.record.row}, {result.record.column})")
    print(f"    Panel:  {fields['panel']}")
    print(f"    Grid:   {fields['grid']}")
    print(f"    Column: {fields['column']}")
    print(f"    Row:    {fields['row']}")
    print(f"    Angle:  {fields['angle']}")


def run_interactive(locator: HoldLocator, output_dir: Path, voice=None) -> None:
    print("Enter a hold number (empty line or 'q' to quit).")
    query = config.DEFAULT_HOLD
    while True:
        if voice is not None:
            result = voice.handle_transcript(query)
            if result is None:
                print("  Didn't catch a hold number")
        else:
            result = locator.lookup(query)
        if result is not None:
            print_result(result)
            if result.found:
                locator.save(output_dir / "current.png")
        try:
            query = input("hold> ").strip()
        except EOFError:
            break
        if not query or query.lower() == "q":
            break


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)
    output_dir = Path(args.output)

    image = Path(args.image)
    if not image.exists():
        print(f"[main] Wall image not found ({image}), drawing on a plain canvas")
        image = None

    try:
        locator = HoldLocator.from_files(
            image_path=image,
            main_csv=Path(args.main_csv),
            aux_csv=Path(args.aux_csv),
            style=HighlightStyle(args.style),
        )
    except (DatasetError, FileNotFoundError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    voice = VoiceAssistant(locator, ConsoleSpeaker()) if args.voice else None
    exporter = Exporter(str(output_dir), show_progress=not args.quiet)

    try:
        if args.export_all:
            results = exporter.lookup_all(locator)
            path = exporter.export_json(results)
            summary = exporter.generate_summary(results)
            print(f"Resolved {summary['found']}/{summary['total']} holds → {path}")

        for hold in args.hold:
            result = locator.lookup(hold)
            print_result(result)
            if voice is not None:
                voice.announce(result)
            if result.found:
                path = locator.save(output_dir / f"hold_{result.hold_id}.png")
                print(f"    Image:  {path}")

        if args.interactive:
            run_interactive(locator, output_dir, voice)
        elif not args.hold and not args.export_all:
            print("Nothing to do: pass --hold, --interactive or --export-all")

    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        sys.exit(0)


if __name__ == "__main__":
    main()

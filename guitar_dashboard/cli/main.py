"""Main entry point for the Guitar Dashboard CLI."""

import sys
import argparse
from typing import List, Optional

import pyfiglet

from ..core.config import ConfigManager, FretboardSettings
from ..errors import GuitarDashboardError
from ..fretboard import TUNINGS, get_tuning
from ..logging_config import get_logger, setup_logging
from ..note_types import Scale
from ..note_utils import key_to_name, note_to_name, parse_key, parse_note
from ..scales import parse_scale_type, scale_pitch_classes
from ..services.frequency import FrequencyService
from .fretboard_view import render_fretboard

logger = get_logger(__name__)

EXIT_USAGE_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per view."""
    parser = argparse.ArgumentParser(
        prog="guitar-dashboard",
        description="Guitar Dashboard - fretboard and scale reference",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--config-dir",
        default=None,
        help="Configuration directory (default: ~/.config/guitar_dashboard)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Fretboard chart
    fretboard_parser = subparsers.add_parser(
        "fretboard", help="Print a fretboard with the selected scale highlighted"
    )
    fretboard_parser.add_argument("--key", default=None, help="Scale root, e.g. 'A' or 'Bb'")
    fretboard_parser.add_argument(
        "--scale", default=None, help="Scale type, e.g. 'major' or 'minor-pentatonic'"
    )
    fretboard_parser.add_argument(
        "--tuning",
        default=None,
        help=f"Named tuning ({', '.join(sorted(TUNINGS))})",
    )
    fretboard_parser.add_argument("--frets", type=int, default=None, help="Highest fret to show")
    fretboard_parser.add_argument(
        "--flats", action="store_true", help="Use flat notes instead of sharps"
    )
    fretboard_parser.add_argument(
        "--no-markers", action="store_true", help="Hide the inlay marker row"
    )

    # Scale listing
    scale_parser = subparsers.add_parser("scale", help="List the notes of a scale")
    scale_parser.add_argument("--key", default=None, help="Scale root")
    scale_parser.add_argument("--scale", default=None, help="Scale type")
    scale_parser.add_argument(
        "--flats", action="store_true", help="Use flat notes instead of sharps"
    )
    scale_parser.add_argument(
        "--banner", action="store_true", help="Print the scale name as a banner"
    )

    # Note to frequency
    frequency_parser = subparsers.add_parser(
        "frequency", help="Print the frequency of a note, e.g. 'A4'"
    )
    frequency_parser.add_argument("note", help="Note in scientific pitch notation")
    frequency_parser.add_argument(
        "--reference", type=float, default=None, help="Frequency of A4 in Hz"
    )

    # Frequency to note
    note_parser = subparsers.add_parser(
        "note", help="Print the nearest note to a frequency"
    )
    note_parser.add_argument("frequency", type=float, help="Frequency in Hz")
    note_parser.add_argument(
        "--reference", type=float, default=None, help="Frequency of A4 in Hz"
    )
    note_parser.add_argument(
        "--flats", action="store_true", help="Use flat notes instead of sharps"
    )

    return parser


def _selected_scale(args: argparse.Namespace, settings: FretboardSettings) -> Scale:
    key = parse_key(args.key) if args.key else settings.key
    scale_type = parse_scale_type(args.scale) if args.scale else settings.scale_type
    return Scale(key, scale_type)


def run_fretboard(args: argparse.Namespace, settings: FretboardSettings) -> None:
    scale = _selected_scale(args, settings)
    tuning = get_tuning(args.tuning) if args.tuning else settings.tuning
    fret_count = args.frets if args.frets is not None else settings.fret_count
    use_flats = args.flats or settings.use_flats
    show_markers = settings.show_markers and not args.no_markers

    for line in render_fretboard(tuning, scale, fret_count, use_flats, show_markers):
        print(line)


def run_scale(args: argparse.Namespace, settings: FretboardSettings) -> None:
    scale = _selected_scale(args, settings)
    use_flats = args.flats or settings.use_flats

    if args.banner:
        print(pyfiglet.figlet_format(scale.name))
    else:
        print(scale.name)
    print(" ".join(key_to_name(key, use_flats) for key in scale_pitch_classes(scale)))


def run_frequency(args: argparse.Namespace, settings: FretboardSettings) -> None:
    reference = args.reference if args.reference is not None else settings.reference_pitch
    note = parse_note(args.note, settings.default_octave)
    frequency = FrequencyService(reference).note_frequency(note)
    print(f"{note.name}: {frequency:.2f} Hz")


def run_note(args: argparse.Namespace, settings: FretboardSettings) -> None:
    reference = args.reference if args.reference is not None else settings.reference_pitch
    use_flats = args.flats or settings.use_flats
    service = FrequencyService(reference)
    note = service.frequency_to_note(args.frequency)
    if note is None:
        raise GuitarDashboardError(f"No note for frequency {args.frequency}")
    cents = service.cents_offset(args.frequency, note)
    print(f"{note_to_name(note, use_flats)} ({cents:+.1f} cents)")


COMMANDS = {
    "fretboard": run_fretboard,
    "scale": run_scale,
    "frequency": run_frequency,
    "note": run_note,
}


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI.

    Args:
        args: Command line arguments, or None to use sys.argv

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    parsed_args = parser.parse_args(args)

    setup_logging(level="DEBUG" if parsed_args.debug else None)

    if parsed_args.command not in COMMANDS:
        parser.print_help()
        return 1

    try:
        settings = ConfigManager(parsed_args.config_dir).fretboard_settings()
        COMMANDS[parsed_args.command](parsed_args, settings)
    except GuitarDashboardError as e:
        logger.debug(f"Command '{parsed_args.command}' failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    return 0


if __name__ == "__main__":
    sys.exit(main())

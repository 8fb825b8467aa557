"""Utility functions for converting and parsing keys and notes."""

import re
from typing import Dict, Optional

from .errors import ParseError
from .logging_config import get_logger
from .note_types import FLAT_NAMES, PITCH_CLASS_COUNT, SHARP_NAMES, Key, Note

# Get logger for this module
logger = get_logger(__name__)

# Mapping between sharp and flat note names
SHARP_TO_FLAT: Dict[str, str] = {
    "C#": "Db",
    "D#": "Eb",
    "F#": "Gb",
    "G#": "Ab",
    "A#": "Bb",
}

FLAT_TO_SHARP: Dict[str, str] = {v: k for k, v in SHARP_TO_FLAT.items()}

NATURAL_PITCH_CLASSES: Dict[str, int] = {
    "C": 0,
    "D": 2,
    "E": 4,
    "F": 5,
    "G": 7,
    "A": 9,
    "B": 11,
}

ACCIDENTAL_STEPS: Dict[str, int] = {"#": 1, "♯": 1, "b": -1, "♭": -1}

# This pattern matches:
# - Note letter (A-G, case insensitive)
# - Any run of accidentals (#, b, or the unicode sharp/flat signs)
# - Optional octave number, which may be negative
NOTE_PATTERN = re.compile(r"^([A-Ga-g])([#b♯♭]*)(-?[0-9]+)?$")


def key_from_int(value: int) -> Key:
    """Normalize any integer (including negatives) to a Key, modulo 12."""
    return Key(value % PITCH_CLASS_COUNT)


def key_to_int(key: Key) -> int:
    return int(key)


def key_to_name(key: Key, use_flats: bool = False) -> str:
    """Return the canonical name of a key.

    Args:
        key: The key to name
        use_flats: If True, spell accidentals as flats (e.g., 'Db') instead of sharps (e.g., 'C#')

    Returns:
        str: The key name
    """
    names = FLAT_NAMES if use_flats else SHARP_NAMES
    return names[int(key)]


def note_to_name(note: Note, use_flats: bool = False) -> str:
    """Return a note name with its octave, e.g. 'C#4' or 'Db4'."""
    return f"{key_to_name(note.key, use_flats)}{note.octave}"


def _split_note(text: str):
    if not isinstance(text, str):
        raise ParseError(f"Expected a note name string, got {type(text).__name__}")

    match = NOTE_PATTERN.match(text.strip())
    if not match:
        logger.debug(f"Could not parse note text '{text}'")
        raise ParseError(f"Invalid note name: '{text}'")

    letter, accidentals, octave = match.groups()
    # Accidentals shift the natural pitch; the result may leave 0..11
    offset = NATURAL_PITCH_CLASSES[letter.upper()] + sum(
        ACCIDENTAL_STEPS[symbol] for symbol in accidentals
    )
    return offset, octave


def parse_key(text: str) -> Key:
    """Parse a key name such as 'C', 'f#', 'Bb' or 'D♭'.

    Enharmonic spellings resolve to the same pitch class, so 'B#' is C
    and 'Fb' is E.

    Raises:
        ParseError: If the text is not a key name, or carries an octave
    """
    offset, octave = _split_note(text)
    if octave is not None:
        raise ParseError(f"Expected a key without octave, got '{text}'")
    return key_from_int(offset)


def parse_note(text: str, default_octave: Optional[int] = None) -> Note:
    """Parse a note in scientific pitch notation such as 'E2', 'C#4' or 'Bb-1'.

    Args:
        text: The note text
        default_octave: Octave to use when the text has none

    Returns:
        Note: The sounding pitch. Spellings that cross an octave boundary
        are resolved, so 'B#3' gives C4 and 'Cb4' gives B3.

    Raises:
        ParseError: If the text is invalid, or has no octave and no default is given
    """
    offset, octave = _split_note(text)
    if octave is None:
        if default_octave is None:
            raise ParseError(f"Note '{text}' has no octave")
        octave_number = default_octave
    else:
        octave_number = int(octave)
    return Note.from_semitone_value(octave_number * PITCH_CLASS_COUNT + offset)


def convert_note_notation(note_name: str, to_flats: bool = False) -> str:
    """Convert a note name between sharp and flat notation.

    Args:
        note_name: The note name to convert (e.g., 'F#2' or 'Gb2')
        to_flats: If True, convert to flats (e.g., 'Gb2'), otherwise to sharps (e.g., 'F#2')

    Returns:
        str: The converted note name, or original if no conversion needed or invalid

    Examples:
        >>> convert_note_notation('F#2', to_flats=True)
        'Gb2'
        >>> convert_note_notation('Gb2', to_flats=False)
        'F#2'
    """
    if not note_name or not isinstance(note_name, str):
        return note_name or ""

    note_name = note_name.strip()

    # Extract note letter and octave
    note_part = "".join(c for c in note_name if not c.isdigit() and c != "-")
    octave_part = note_name[len(note_part) :]

    # Check if conversion is needed
    if to_flats and note_part in SHARP_TO_FLAT:
        return f"{SHARP_TO_FLAT[note_part]}{octave_part}"
    elif not to_flats and note_part in FLAT_TO_SHARP:
        return f"{FLAT_TO_SHARP[note_part]}{octave_part}"

    # No conversion needed or possible
    return note_name

"""Scale patterns and helpers for 12-TET.

Provides interval lookups, scale membership tests and parsing of scale
type names coming from the UI or configuration.
"""

from typing import Dict, Iterator, Tuple, Union

from .errors import ParseError
from .logging_config import get_logger
from .note_types import PITCH_CLASS_COUNT, Key, Note, Scale, ScaleType

logger = get_logger(__name__)

# Alternative names accepted by parse_scale_type
SCALE_ALIASES: Dict[str, ScaleType] = {
    "minor": ScaleType.NATURAL_MINOR,
    "ionian": ScaleType.MAJOR,
    "aeolian": ScaleType.NATURAL_MINOR,
}


def _normalize_scale_name(text: str) -> str:
    return "_".join(text.strip().lower().replace("-", " ").replace("_", " ").split())


def scale_intervals(scale_type: ScaleType) -> Tuple[int, ...]:
    """Return semitone offsets from the root for a scale type.

    Args:
        scale_type: The scale type.

    Returns:
        Ascending offsets starting at 0, each in [0, 12).
    """
    return scale_type.intervals


def scale_contains(scale: Scale, candidate: Union[Key, Note]) -> bool:
    """Check whether a key (or the pitch class of a note) belongs to a scale.

    Octave is irrelevant: only the pitch class of a Note is compared.
    """
    key = candidate.key if isinstance(candidate, Note) else candidate
    pitch_class = int(key) % PITCH_CLASS_COUNT
    return any(
        (int(scale.root) + interval) % PITCH_CLASS_COUNT == pitch_class
        for interval in scale.scale_type.intervals
    )


def scale_pitch_classes(scale: Scale) -> Tuple[Key, ...]:
    """Return the scale's keys in degree order, starting at the root."""
    return tuple(scale.root.transpose(interval) for interval in scale.scale_type.intervals)


def notes_in_scale(scale: Scale, low: Note, high: Note) -> Iterator[Note]:
    """Walk every scale note from `low` up to `high`, both inclusive.

    The walk is lazy, so wide ranges cost nothing until consumed.
    """
    for value in range(low.semitone_value, high.semitone_value + 1):
        note = Note.from_semitone_value(value)
        if scale_contains(scale, note.key):
            yield note


def parse_scale_type(text: str) -> ScaleType:
    """Parse a scale type name such as 'major', 'Natural Minor' or 'minor-pentatonic'.

    Raises:
        ParseError: If the name is not a known scale type.
    """
    if not isinstance(text, str) or not text.strip():
        raise ParseError(f"Invalid scale type: {text!r}")

    normalized = _normalize_scale_name(text)
    if normalized in SCALE_ALIASES:
        return SCALE_ALIASES[normalized]
    try:
        return ScaleType[normalized.upper()]
    except KeyError:
        logger.debug(f"Unknown scale type '{text}' (normalized '{normalized}')")
        raise ParseError(f"Unknown scale type: '{text}'") from None


def scale_type_from_int(index: int) -> ScaleType:
    """Look up a scale type by its stable 1-based selector index.

    Raises:
        ParseError: If no scale type has this index.
    """
    for scale_type in ScaleType:
        if scale_type.index == index:
            return scale_type
    raise ParseError(f"Unknown scale index: {index}")

"""Fretboard model: maps (string, fret) positions to pitches.

Nothing here keeps per-cell state. Positions and cells are derived on
demand from the tuning, so a renderer can draw any number of frets and
strings in one pass over `iter_cells`.
"""

from typing import Dict, FrozenSet, Iterator, Sequence, Tuple

from .errors import DomainError, ParseError
from .logging_config import get_logger
from .note_types import FretboardPosition, FretCellInfo, Key, Note, Scale
from .scales import scale_contains

logger = get_logger(__name__)

Tuning = Sequence[Note]

# Inlay dots on one 24-fret neck; the pattern repeats every 12 frets beyond that
MARKED_FRETS: FrozenSet[int] = frozenset({3, 5, 7, 9, 12, 15, 17, 19, 21, 24})
_MARKER_CYCLE = frozenset({0, 3, 5, 7, 9})

STANDARD_TUNING: Tuple[Note, ...] = (
    Note(Key.E, 2),  # String 6 (low E)
    Note(Key.A, 2),
    Note(Key.D, 3),
    Note(Key.G, 3),
    Note(Key.B, 3),
    Note(Key.E, 4),  # String 1 (high E)
)

TUNINGS: Dict[str, Tuple[Note, ...]] = {
    "standard": STANDARD_TUNING,
    "half_step_down": tuple(note.transpose(-1) for note in STANDARD_TUNING),
    "drop_d": (Note(Key.D, 2),) + STANDARD_TUNING[1:],
    "drop_c": tuple(note.transpose(-2) for note in (Note(Key.D, 2),) + STANDARD_TUNING[1:]),
    "dadgad": (
        Note(Key.D, 2),
        Note(Key.A, 2),
        Note(Key.D, 3),
        Note(Key.G, 3),
        Note(Key.A, 3),
        Note(Key.D, 4),
    ),
    "open_g": (
        Note(Key.D, 2),
        Note(Key.G, 2),
        Note(Key.D, 3),
        Note(Key.G, 3),
        Note(Key.B, 3),
        Note(Key.D, 4),
    ),
    "open_d": (
        Note(Key.D, 2),
        Note(Key.A, 2),
        Note(Key.D, 3),
        Note(Key.F_SHARP, 3),
        Note(Key.A, 3),
        Note(Key.D, 4),
    ),
    "open_c": (
        Note(Key.C, 2),
        Note(Key.G, 2),
        Note(Key.C, 3),
        Note(Key.G, 3),
        Note(Key.C, 4),
        Note(Key.E, 4),
    ),
    "all_fourths": STANDARD_TUNING[:4] + (Note(Key.C, 4), Note(Key.F, 4)),
    "bass_standard": (
        Note(Key.E, 1),
        Note(Key.A, 1),
        Note(Key.D, 2),
        Note(Key.G, 2),
    ),
}


def get_tuning(name: str) -> Tuple[Note, ...]:
    """Look up a named tuning, e.g. 'standard' or 'Drop D'.

    Raises:
        ParseError: If the name is not a known tuning.
    """
    normalized = "_".join(str(name).strip().lower().replace("-", " ").split())
    try:
        return TUNINGS[normalized]
    except KeyError:
        raise ParseError(
            f"Unknown tuning '{name}'. Available: {', '.join(sorted(TUNINGS))}"
        ) from None


def is_fret_marked(fret: int) -> bool:
    """Check whether a fret carries an inlay dot."""
    if fret <= 24:
        return fret in MARKED_FRETS
    return fret % 12 in _MARKER_CYCLE


def position_pitch(tuning: Tuning, position: FretboardPosition) -> Note:
    """Return the note sounding at a fretboard position.

    Args:
        tuning: Open-string notes, lowest string first
        position: String index into the tuning and fret number (0 = open)

    Returns:
        Note: The open-string note transposed up by the fret number

    Raises:
        DomainError: If the string index is outside the tuning or the fret is negative
    """
    if not 0 <= position.string < len(tuning):
        raise DomainError(
            f"String index {position.string} out of range for a {len(tuning)}-string tuning"
        )
    if position.fret < 0:
        raise DomainError(f"Fret must be non-negative, got {position.fret}")
    return tuning[position.string].transpose(position.fret)


def position_in_scale(position: FretboardPosition, tuning: Tuning, scale: Scale) -> bool:
    """Check whether the pitch at a position belongs to the scale (octave ignored)."""
    return scale_contains(scale, position_pitch(tuning, position).key)


class PositionSequence:
    """Lazy, restartable sequence of fretboard positions.

    Ordered by string, then by fret (0..fret_count inclusive). Each
    iteration starts a fresh generator; nothing is precomputed.

    len() is capped at sys.maxsize by Python; use `size` for boards larger
    than that.
    """

    def __init__(self, string_count: int, fret_count: int):
        if fret_count < 0:
            raise DomainError(f"Fret count must be non-negative, got {fret_count}")
        self.string_count = string_count
        self.fret_count = fret_count

    def __iter__(self) -> Iterator[FretboardPosition]:
        for string in range(self.string_count):
            for fret in range(self.fret_count + 1):
                yield FretboardPosition(string, fret)

    @property
    def size(self) -> int:
        """Number of positions, with no upper bound."""
        return self.string_count * (self.fret_count + 1)

    def __len__(self) -> int:
        return self.size

    def __contains__(self, position) -> bool:
        return (
            isinstance(position, FretboardPosition)
            and 0 <= position.string < self.string_count
            and 0 <= position.fret <= self.fret_count
        )

    def __repr__(self):
        return f"PositionSequence(strings={self.string_count}, frets=0..{self.fret_count})"


def enumerate_positions(tuning: Tuning, fret_count: int) -> PositionSequence:
    """Return every position on the fretboard as a lazy, restartable sequence.

    Raises:
        DomainError: If fret_count is negative
    """
    return PositionSequence(len(tuning), fret_count)


def fret_cell(tuning: Tuning, position: FretboardPosition, scale: Scale) -> FretCellInfo:
    """Derive the render information for one fretboard position."""
    note = position_pitch(tuning, position)
    return FretCellInfo(
        position=position,
        note=note,
        in_scale=scale_contains(scale, note.key),
        is_root=note.key == scale.root,
        is_marked=is_fret_marked(position.fret),
    )


def iter_cells(tuning: Tuning, scale: Scale, fret_count: int) -> Iterator[FretCellInfo]:
    """Yield render information for every position, one cell at a time."""
    logger.debug(f"Rendering pass: {len(tuning)} strings, frets 0..{fret_count}, {scale}")
    for position in enumerate_positions(tuning, fret_count):
        yield fret_cell(tuning, position, scale)

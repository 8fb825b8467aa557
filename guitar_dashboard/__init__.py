"""Guitar Dashboard: music theory engine and fretboard model.

Everything here is pure and stateless; the UI passes the selected key,
scale, tuning and fret count on every call.
"""

from .errors import DomainError, GuitarDashboardError, ParseError
from .fretboard import (
    MARKED_FRETS,
    STANDARD_TUNING,
    TUNINGS,
    PositionSequence,
    enumerate_positions,
    fret_cell,
    get_tuning,
    is_fret_marked,
    iter_cells,
    position_in_scale,
    position_pitch,
)
from .note_types import FretboardPosition, FretCellInfo, Key, Note, Scale, ScaleType
from .note_utils import (
    convert_note_notation,
    key_from_int,
    key_to_int,
    key_to_name,
    note_to_name,
    parse_key,
    parse_note,
)
from .scales import (
    notes_in_scale,
    parse_scale_type,
    scale_contains,
    scale_intervals,
    scale_pitch_classes,
    scale_type_from_int,
)
from .services.frequency import A4_FREQUENCY, FrequencyService, frequency_to_note, note_frequency

__version__ = "0.1.0"

__all__ = [
    "A4_FREQUENCY",
    "DomainError",
    "FrequencyService",
    "FretCellInfo",
    "FretboardPosition",
    "GuitarDashboardError",
    "Key",
    "MARKED_FRETS",
    "Note",
    "ParseError",
    "PositionSequence",
    "STANDARD_TUNING",
    "Scale",
    "ScaleType",
    "TUNINGS",
    "convert_note_notation",
    "enumerate_positions",
    "fret_cell",
    "frequency_to_note",
    "get_tuning",
    "is_fret_marked",
    "iter_cells",
    "key_from_int",
    "key_to_int",
    "key_to_name",
    "note_frequency",
    "note_to_name",
    "notes_in_scale",
    "parse_key",
    "parse_note",
    "parse_scale_type",
    "position_in_scale",
    "position_pitch",
    "scale_contains",
    "scale_intervals",
    "scale_pitch_classes",
    "scale_type_from_int",
]

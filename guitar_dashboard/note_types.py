"""Type definitions for the Guitar Dashboard project."""

from dataclasses import dataclass
from enum import Enum, IntEnum
from functools import total_ordering
from typing import FrozenSet, List, Tuple

# Canonical spellings, indexed by pitch class
SHARP_NAMES: List[str] = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
FLAT_NAMES: List[str] = ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"]

PITCH_CLASS_COUNT = 12


class Key(IntEnum):
    """One of the twelve chromatic pitch classes, valued 0 (C) to 11 (B)."""

    C = 0
    C_SHARP = 1
    D = 2
    D_SHARP = 3
    E = 4
    F = 5
    F_SHARP = 6
    G = 7
    G_SHARP = 8
    A = 9
    A_SHARP = 10
    B = 11

    @property
    def label(self) -> str:
        """Sharp-preferring display name, e.g. 'C#'."""
        return SHARP_NAMES[self.value]

    @property
    def flat_label(self) -> str:
        return FLAT_NAMES[self.value]

    def transpose(self, steps: int) -> "Key":
        """Return the key `steps` semitones away, wrapping modulo 12."""
        return Key((self.value + steps) % PITCH_CLASS_COUNT)


class ScaleType(Enum):
    """Named scale patterns.

    Each member carries a stable selector index, a display name and its
    semitone offsets from the root (ascending, starting at 0).
    """

    MAJOR = (1, "Major", (0, 2, 4, 5, 7, 9, 11))
    NATURAL_MINOR = (2, "Natural Minor", (0, 2, 3, 5, 7, 8, 10))
    MAJOR_PENTATONIC = (3, "Major Pentatonic", (0, 2, 4, 7, 9))
    MINOR_PENTATONIC = (4, "Minor Pentatonic", (0, 3, 5, 7, 10))
    MAJOR_BLUES = (5, "Major Blues", (0, 2, 3, 4, 7, 9))
    MINOR_BLUES = (6, "Minor Blues", (0, 3, 5, 6, 7, 10))
    HARMONIC_MINOR = (7, "Harmonic Minor", (0, 2, 3, 5, 7, 8, 11))
    MELODIC_MINOR = (8, "Melodic Minor", (0, 2, 3, 5, 7, 9, 11))
    DORIAN = (9, "Dorian", (0, 2, 3, 5, 7, 9, 10))
    PHRYGIAN = (10, "Phrygian", (0, 1, 3, 5, 7, 8, 10))
    LYDIAN = (11, "Lydian", (0, 2, 4, 6, 7, 9, 11))
    MIXOLYDIAN = (12, "Mixolydian", (0, 2, 4, 5, 7, 9, 10))
    LOCRIAN = (13, "Locrian", (0, 1, 3, 5, 6, 8, 10))

    def __init__(self, index: int, display_name: str, intervals: Tuple[int, ...]):
        self.index = index
        self.display_name = display_name
        self.intervals = intervals


@total_ordering
@dataclass(frozen=True)
class Note:
    """An absolute pitch in scientific pitch notation (C4 is middle C)."""

    key: Key
    octave: int

    @property
    def semitone_value(self) -> int:
        """Semitones above C0."""
        return int(self.key) + self.octave * PITCH_CLASS_COUNT

    @property
    def midi_number(self) -> int:
        return self.semitone_value + PITCH_CLASS_COUNT

    @property
    def name(self) -> str:
        return f"{self.key.label}{self.octave}"

    def transpose(self, semitones: int) -> "Note":
        """Return the note `semitones` away, carrying across octave boundaries."""
        octave, pitch_class = divmod(self.semitone_value + semitones, PITCH_CLASS_COUNT)
        return Note(Key(pitch_class), octave)

    @classmethod
    def from_semitone_value(cls, value: int) -> "Note":
        octave, pitch_class = divmod(value, PITCH_CLASS_COUNT)
        return cls(Key(pitch_class), octave)

    def __lt__(self, other: "Note") -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self.semitone_value < other.semitone_value

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Scale:
    """A root key combined with a scale type."""

    root: Key
    scale_type: ScaleType

    @property
    def pitch_classes(self) -> FrozenSet[Key]:
        return frozenset(self.root.transpose(step) for step in self.scale_type.intervals)

    @property
    def name(self) -> str:
        return f"{self.root.label} {self.scale_type.display_name}"

    def contains(self, key: Key) -> bool:
        return Key(key % PITCH_CLASS_COUNT) in self.pitch_classes

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class FretboardPosition:
    """Represents a position on the guitar fretboard."""

    string: int  # String index into the tuning (0 is the lowest string)
    fret: int  # Fret number (0 for open string)

    def __str__(self):
        return f"S{self.string}F{self.fret}"


@dataclass(frozen=True)
class FretCellInfo:
    """Derived view of one fretboard cell, computed on demand for rendering."""

    position: FretboardPosition
    note: Note  # Pitch sounding at this position
    in_scale: bool  # Whether the pitch class belongs to the active scale
    is_root: bool  # Whether the pitch class is the scale root
    is_marked: bool  # Whether the fret carries an inlay dot

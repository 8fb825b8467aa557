#!/usr/bin/env python3

import numbers

import numpy as np
from typing import (
    ClassVar,
    Optional,
    TypeAlias,
)

from ..errors import DomainError
from ..logging_config import get_logger
from ..note_types import Key, Note

logger = get_logger(__name__)

A4_FREQUENCY = 440.0


class FrequencyService:
    """Equal-tempered conversions between notes and frequencies.

    The reference pitch for A4 is configurable and defaults to 440 Hz.
    """

    # Type aliases
    Frequency: TypeAlias = float
    Cents: TypeAlias = float

    REFERENCE_NOTE: ClassVar[Note] = Note(Key.A, 4)
    SEMITONES_PER_OCTAVE: ClassVar[int] = 12

    def __init__(self, reference_pitch: float = A4_FREQUENCY):
        if not isinstance(reference_pitch, numbers.Real) or not np.isfinite(reference_pitch):
            raise DomainError(f"Invalid reference pitch: {reference_pitch}")
        if reference_pitch <= 0:
            raise DomainError(f"Reference pitch must be positive, got {reference_pitch}")
        self.reference_pitch = float(reference_pitch)

    def _semitones_from_reference(self, note: Note) -> int:
        return note.semitone_value - self.REFERENCE_NOTE.semitone_value

    def note_frequency(self, note: Note) -> Frequency:
        """Frequency of a note in Hz.

        Args:
            note: The note. Negative octaves are allowed.

        Returns:
            float: reference_pitch * 2 ** (semitones from A4 / 12)
        """
        semitones = self._semitones_from_reference(note)
        return float(self.reference_pitch * np.exp2(semitones / self.SEMITONES_PER_OCTAVE))

    def frequency_to_note(self, frequency: float) -> Optional[Note]:
        """Convert a frequency in Hz to the nearest note.

        Args:
            frequency: The frequency in Hz to convert

        Returns:
            Note: The nearest equal-tempered note, or None if the frequency is invalid
        """
        if not isinstance(frequency, numbers.Real) or not np.isfinite(frequency):
            logger.warning(f"Invalid frequency value: {frequency}")
            return None

        if frequency <= 0:
            logger.warning(f"Non-positive frequency: {frequency}")
            return None

        # Calculate the number of half steps from A4
        half_steps = int(round(self.SEMITONES_PER_OCTAVE * np.log2(frequency / self.reference_pitch)))
        return self.REFERENCE_NOTE.transpose(half_steps)

    def cents_offset(self, frequency: float, note: Note) -> Cents:
        """Signed deviation of `frequency` from `note`, in cents."""
        if not np.isfinite(frequency) or frequency <= 0:
            raise DomainError(f"Frequency must be a positive number, got {frequency}")
        return float(1200.0 * np.log2(frequency / self.note_frequency(note)))

    def string_frequencies(self, open_note: Note, fret_count: int) -> np.ndarray:
        """Frequencies of frets 0..fret_count on a string tuned to `open_note`."""
        if fret_count < 0:
            raise DomainError(f"Fret count must be non-negative, got {fret_count}")
        semitones = self._semitones_from_reference(open_note) + np.arange(fret_count + 1)
        return self.reference_pitch * np.exp2(semitones / self.SEMITONES_PER_OCTAVE)


def note_frequency(note: Note, reference_pitch: float = A4_FREQUENCY) -> float:
    """Frequency in Hz of a note, with A4 tuned to `reference_pitch`."""
    return FrequencyService(reference_pitch).note_frequency(note)


def frequency_to_note(frequency: float, reference_pitch: float = A4_FREQUENCY) -> Optional[Note]:
    """Nearest note to a frequency, or None if the frequency is invalid."""
    return FrequencyService(reference_pitch).frequency_to_note(frequency)

"""Services shared by the Guitar Dashboard front ends."""

from .frequency import A4_FREQUENCY, FrequencyService, frequency_to_note, note_frequency

__all__ = ["A4_FREQUENCY", "FrequencyService", "frequency_to_note", "note_frequency"]

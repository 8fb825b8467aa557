"""Plain-text fretboard renderer used by the command line."""

from typing import List

from ..fretboard import Tuning, is_fret_marked, iter_cells
from ..note_types import FretCellInfo, Scale
from ..note_utils import key_to_name, note_to_name

CELL_WIDTH = 5
OUT_OF_SCALE = "-"


def format_cell(cell: FretCellInfo, use_flats: bool = False) -> str:
    """Text for one cell: the note name if in scale, bracketed for the root."""
    if not cell.in_scale:
        return OUT_OF_SCALE.center(CELL_WIDTH, "-")
    name = key_to_name(cell.note.key, use_flats)
    if cell.is_root:
        name = f"[{name}]"
    return name.center(CELL_WIDTH, "-")


def render_fretboard(
    tuning: Tuning,
    scale: Scale,
    fret_count: int,
    use_flats: bool = False,
    show_markers: bool = True,
) -> List[str]:
    """Render the fretboard as text lines, highest string on top.

    Cells are drawn straight from `iter_cells` as they are yielded; only
    the finished text line for each string is kept.
    """
    label_width = max((len(note_to_name(note, use_flats)) for note in tuning), default=2) + 1
    lines: List[str] = []
    current_string = None
    row = ""

    for cell in iter_cells(tuning, scale, fret_count):
        if cell.position.string != current_string:
            if current_string is not None:
                lines.append(row)
            current_string = cell.position.string
            open_name = note_to_name(tuning[current_string], use_flats)
            row = open_name.ljust(label_width) + "|"
        row += format_cell(cell, use_flats) + "|"
    if current_string is not None:
        lines.append(row)

    lines.reverse()

    header = " " * (label_width + 1) + "".join(
        str(fret).center(CELL_WIDTH + 1) for fret in range(fret_count + 1)
    )
    output = [scale.name, header.rstrip()] + lines
    if show_markers:
        markers = " " * (label_width + 1) + "".join(
            _marker(fret).center(CELL_WIDTH + 1) for fret in range(fret_count + 1)
        )
        output.append(markers.rstrip())
    return output


def _marker(fret: int) -> str:
    if not is_fret_marked(fret):
        return ""
    return "**" if fret % 12 == 0 else "*"

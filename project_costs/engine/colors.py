"""Series colors for the stacked cost chart.

Colors are assigned by position in the *sorted* project list, cycling through
the palette. A project keeps its color only while the sorted order of the
project set is unchanged; inserting a name that sorts earlier shifts every
later project to the next color.
"""
from __future__ import annotations

from typing import Dict, Iterable, Sequence

DEFAULT_PALETTE: tuple[str, ...] = (
    "#8884d8",
    "#82ca9d",
    "#ffc658",
    "#ff7300",
    "#a4de6c",
    "#d0ed57",
    "#83a6ed",
    "#8dd1e1",
)


def color_for_index(index: int, palette: Sequence[str] = DEFAULT_PALETTE) -> str:
    if not palette:
        raise ValueError("Palette must contain at least one color.")
    return palette[index % len(palette)]


def assign_colors(project_names: Iterable[str], palette: Sequence[str] = DEFAULT_PALETTE) -> Dict[str, str]:
    if not palette:
        raise ValueError("Palette must contain at least one color.")
    return {name: color_for_index(index, palette) for index, name in enumerate(sorted(set(project_names)))}

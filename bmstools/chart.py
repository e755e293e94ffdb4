"""Provides ChartData, the central model for a parsed chart
Every chart file is converted to a ChartData instance

In Be-Music Source terminology, an object represents anything that can
appear in a chart. Objects are laid out on lines that each cover one
channel of one measure, the number of objects on a line being the
resolution of that line."""

from __future__ import annotations

from dataclasses import dataclass, field
from operator import attrgetter
from pathlib import Path
from typing import List, Optional, Sequence, Union

from more_itertools import ilen, unique_justseen


@dataclass(frozen=True)
class Silent:
    """Nothing is triggered at this slot"""


@dataclass(frozen=True)
class Note:
    """Triggers the sound found at index `sound` of the chart's sound paths"""

    sound: int

    def __post_init__(self) -> None:
        if self.sound < 1:
            raise ValueError(f"sound index must be strictly positive : {self.sound}")


Object = Union[Silent, Note]


@dataclass(frozen=True)
class SubSequence:
    """A single #MMMCC:... line"""

    measure: int
    channel: int
    notes: Sequence[Object]

    def __post_init__(self) -> None:
        object.__setattr__(self, "notes", tuple(self.notes))

    @property
    def resolution(self) -> int:
        return len(self.notes)


@dataclass(frozen=True)
class ChartData:
    player: int = 0
    genre: str = ""
    title: str = ""
    artist: str = ""
    bpm: float = 0.0
    play_level: int = 0
    sound_paths: Sequence[Path] = field(default_factory=tuple)
    subseqs: Sequence[SubSequence] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "sound_paths", tuple(self.sound_paths))
        object.__setattr__(self, "subseqs", tuple(self.subseqs))

    def count_measures(self) -> int:
        """Number of runs of consecutive lines that share the same measure.
        A measure split in two non-adjacent places counts twice"""
        return ilen(unique_justseen(self.subseqs, key=attrgetter("measure")))

    def get_measure(self, measure: int) -> List[SubSequence]:
        return [s for s in self.subseqs if s.measure == measure]

    def measures(self) -> List[int]:
        return sorted(set(s.measure for s in self.subseqs))

    def sound_path(self, note: Note) -> Optional[Path]:
        """Returns None when the note points outside of the sound paths,
        which charts in the wild do quite often"""
        if note.sound < len(self.sound_paths):
            return self.sound_paths[note.sound]
        else:
            return None

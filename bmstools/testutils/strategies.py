"""
Hypothesis strategies to generate objects, lines and charts
"""

from typing import List, Optional

import hypothesis.strategies as st

from bmstools.chart import ChartData, Note, Object, Silent, SubSequence
from bmstools.formats.bms.symbols import encode_object

BASE_36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"


def base_36_symbol() -> st.SearchStrategy[str]:
    return st.text(alphabet=BASE_36_DIGITS, min_size=2, max_size=2)


def note(max_sound: int = 36 ** 2 - 1) -> st.SearchStrategy[Note]:
    return st.builds(Note, sound=st.integers(min_value=1, max_value=max_sound))


def bms_object() -> st.SearchStrategy[Object]:
    return st.one_of(st.just(Silent()), note())


@st.composite
def subsequence(
    draw: st.DrawFn,
    measure_strat: st.SearchStrategy[int] = st.integers(min_value=0, max_value=999),
    channel_strat: st.SearchStrategy[int] = st.integers(min_value=0, max_value=99),
    max_resolution: Optional[int] = 32,
) -> SubSequence:
    notes: List[Object] = draw(st.lists(bms_object(), max_size=max_resolution))
    return SubSequence(
        measure=draw(measure_strat),
        channel=draw(channel_strat),
        notes=notes,
    )


@st.composite
def chart(draw: st.DrawFn) -> ChartData:
    return ChartData(
        subseqs=draw(
            st.lists(
                subsequence(measure_strat=st.integers(min_value=0, max_value=5)),
                max_size=20,
            )
        )
    )


def dump_subsequence(subseq: SubSequence) -> str:
    symbols = "".join(encode_object(o) for o in subseq.notes)
    return f"#{subseq.measure:03}{subseq.channel:02}:{symbols}"

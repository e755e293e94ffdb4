"""Timed object lines look like this :

    #MMMCC:SSSSSS...

MMM : measure number, CC : channel number, SS... : the objects, see symbols.py

These lines are searched for anywhere in the text, even in the middle of
another line"""

import re
from typing import Iterator, Optional

from bmstools.chart import SubSequence

from .symbols import decode_symbols

SUBSEQUENCE = re.compile(r"#(?P<measure>.{3})(?P<channel>.{2}):(?P<payload>.*)")

UNSIGNED_INTEGER = re.compile(r"\+?[0-9]+")


def parse_unsigned(raw: str) -> Optional[int]:
    if UNSIGNED_INTEGER.fullmatch(raw):
        return int(raw)
    else:
        return None


def make_subsequence(match: "re.Match[str]") -> SubSequence:
    measure = parse_unsigned(match["measure"])
    channel = parse_unsigned(match["channel"])
    return SubSequence(
        measure=measure if measure is not None else 0,
        channel=channel if channel is not None else 0,
        notes=decode_symbols(match["payload"]),
    )


def parse_subsequence(line: str) -> Optional[SubSequence]:
    match = SUBSEQUENCE.search(line)
    if match is None:
        return None

    return make_subsequence(match)


def iter_subsequences(text: str) -> Iterator[SubSequence]:
    for match in SUBSEQUENCE.finditer(text):
        yield make_subsequence(match)

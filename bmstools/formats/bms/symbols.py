"""Objects are written as base 36 numbers, two characters per object :

    #00111:01020000
           ^^      → 01 : sound n°1
             ^^    → 02 : sound n°2
               ^^  → 00 : nothing
                 ^^→ 00 : nothing

Symbols that aren't valid base 36 numbers are ignored altogether, which means
they shorten the line instead of leaving a gap in it"""

import re
from typing import List, Optional

from more_itertools import sliced

from bmstools.chart import Note, Object, Silent

SYMBOL_WIDTH = 2

# int(x, 36) is way too lenient (whitespace, minus sign, underscores ...)
BASE_36_SYMBOL = re.compile(r"\+?[0-9a-zA-Z]+")


def decode_symbol(symbol: str) -> Optional[Object]:
    if not BASE_36_SYMBOL.fullmatch(symbol):
        return None

    value = int(symbol, 36)
    if value == 0:
        return Silent()
    else:
        return Note(sound=value)


def decode_symbols(payload: str) -> List[Object]:
    objects = []
    for symbol in sliced(payload, SYMBOL_WIDTH):
        obj = decode_symbol(symbol)
        if obj is not None:
            objects.append(obj)

    return objects


def encode_object(obj: Object) -> str:
    """Only meant for displaying objects, since charts can't be written back"""
    if isinstance(obj, Silent):
        return "00"
    else:
        return to_base_36(obj.sound).rjust(SYMBOL_WIDTH, "0")


DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def to_base_36(value: int) -> str:
    if value < 0:
        raise ValueError(f"Cannot convert negative value to base 36 : {value}")

    digits = []
    while True:
        value, digit = divmod(value, 36)
        digits.append(DIGITS[digit])
        if value == 0:
            break

    return "".join(reversed(digits))

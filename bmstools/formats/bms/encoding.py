"""Charts do not declare their encoding anywhere, so it has to be guessed by
trying to decode them.

The vast majority of BMS files out there were written on japanese Windows
machines and are encoded in shift-jis (the microsoft flavor of it, hence
cp932). Newer tools tend to write utf-8 instead."""

import codecs
from typing import Tuple

from .errors import DecodeError

LEGACY_ENCODING = "cp932"

# cp932 maps the bytes 0xA0 and 0xFD to 0xFF, which are not valid shift-jis,
# to these private use code points instead of failing
UNMAPPED_LEGACY_BYTES = frozenset("\uf8f0\uf8f1\uf8f2\uf8f3")

BYTE_ORDER_MARKS: Tuple[Tuple[bytes, str], ...] = (
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)


def decode_chart(data: bytes, legacy_encoding: str = LEGACY_ENCODING) -> str:
    # Unknown codecs should raise LookupError right away instead of passing
    # for a failed decoding attempt
    codecs.lookup(legacy_encoding)

    for bom, encoding in BYTE_ORDER_MARKS:
        if data.startswith(bom):
            try:
                return data.decode(encoding)
            except UnicodeDecodeError as e:
                raise DecodeError([encoding]) from e

    try:
        text = data.decode(legacy_encoding)
    except UnicodeDecodeError:
        pass
    else:
        if UNMAPPED_LEGACY_BYTES.isdisjoint(text):
            return text

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError([legacy_encoding, "utf-8"]) from e

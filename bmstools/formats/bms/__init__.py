"""
This module contains the code for the Be-Music Source format (BMS), and its
variants that share the same syntax (BME, BML, PMS).

BMS is a plain-text format where every line that matters starts with a '#'.
Header commands give the song metadata and declare the sound files used by
the chart, timed object lines place references to these sounds on a
measure-based grid.

Some (japanese) documentation on the format :
- http://bm98.yaneu.com/bm98/bmsformat.html
"""

from .errors import DecodeError, FieldParseError
from .load import load_bms, load_folder, parse_bms, parse_bms_text

"""
Module containing all the load code for chart files
"""
from .bms import (
    DecodeError,
    FieldParseError,
    load_bms,
    load_folder,
    parse_bms,
    parse_bms_text,
)

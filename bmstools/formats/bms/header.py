"""
Parsing of the header commands, they all look like this :

    #COMMAND value

Supported commands :
  - #PLAYER <int>       : 1 for single play, 2 for couple play, 3 for double play
  - #GENRE <str>        : song genre
  - #TITLE <str>        : song title
  - #ARTIST <str>       : artist's name
  - #BPM <float>        : tempo
  - #PLAYLEVEL <int>    : chart level
  - #WAVxx <path>       : sound file path (also accepted as #wavxx)

Everything else is ignored, including lines that aren't commands at all
"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator, List, Optional, Tuple

from parsimonious import Grammar, NodeVisitor, ParseError
from parsimonious.nodes import Node

from .errors import FieldParseError

command_grammar = Grammar(
    r"""
    line        = "#" key " " value
    key         = ~r"[^ ]*"
    value       = ~r".*"s
    """
)


class CommandVisitor(NodeVisitor):

    """Returns a (key, value) tuple"""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.key: Optional[str] = None
        self.value: Optional[str] = None

    def visit_line(self, node: Node, visited_children: List[Node]) -> Tuple[str, str]:
        if self.key is None or self.value is None:
            raise ValueError("No key found after parsing command")
        return self.key, self.value

    def visit_key(self, node: Node, visited_children: List[Node]) -> None:
        self.key = node.text

    def visit_value(self, node: Node, visited_children: List[Node]) -> None:
        self.value = node.text

    def generic_visit(self, node: Node, visited_children: List[Node]) -> None:
        ...


def is_command(line: str) -> bool:
    try:
        command_grammar.parse(line)
    except ParseError:
        return False
    else:
        return True


def parse_command(line: str) -> Tuple[str, str]:
    return CommandVisitor().visit(command_grammar.parse(line))  # type: ignore


SOUND_DECLARATION_PREFIXES = ("WAV", "wav")

UNSIGNED_BYTE = re.compile(r"\+?[0-9]+")
FLOAT = re.compile(
    r"[+-]?(([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def parse_unsigned_byte(field_name: str, raw_value: str) -> int:
    if UNSIGNED_BYTE.fullmatch(raw_value) and int(raw_value) < 256:
        return int(raw_value)
    else:
        raise FieldParseError(field_name, raw_value, "an integer between 0 and 255")


def parse_float(field_name: str, raw_value: str) -> float:
    if FLOAT.fullmatch(raw_value):
        return float(raw_value)
    else:
        raise FieldParseError(field_name, raw_value, "a decimal number")


@dataclass
class Header:
    player: int = 0
    genre: str = ""
    title: str = ""
    artist: str = ""
    bpm: float = 0.0
    play_level: int = 0
    sound_paths: List[Path] = field(default_factory=list)


class HeaderParser:
    def __init__(self) -> None:
        self.header = Header()

    def handle_command(self, command: str, value: str) -> None:
        method = getattr(self, f"do_{command}", None)
        if method is not None:
            method(value)
        elif command.startswith(SOUND_DECLARATION_PREFIXES):
            self.header.sound_paths.append(Path(value))

    def do_PLAYER(self, value: str) -> None:
        self.header.player = parse_unsigned_byte("PLAYER", value)

    def do_GENRE(self, value: str) -> None:
        self.header.genre = value

    def do_TITLE(self, value: str) -> None:
        self.header.title = value

    def do_ARTIST(self, value: str) -> None:
        self.header.artist = value

    def do_BPM(self, value: str) -> None:
        self.header.bpm = parse_float("BPM", value)

    def do_PLAYLEVEL(self, value: str) -> None:
        self.header.play_level = parse_unsigned_byte("PLAYLEVEL", value)

    def load_line(self, line: str) -> None:
        if is_command(line):
            self.handle_command(*parse_command(line))


def parse_header(text: str) -> Header:
    parser = HeaderParser()
    for line in iter_lines(text):
        parser.load_line(line)

    return parser.header


def iter_lines(text: str) -> Iterator[str]:
    """Lines only end on LF or CRLF, other control characters such as form
    feeds are part of the line"""
    for line in text.split("\n"):
        if line.endswith("\r"):
            yield line[:-1]
        else:
            yield line

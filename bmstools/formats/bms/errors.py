from typing import Sequence


class DecodeError(ValueError):
    """The file could not be read as text using any of the encodings tried"""

    def __init__(self, encodings: Sequence[str]) -> None:
        super().__init__(
            f"Could not decode the chart using any of these encodings : "
            f"{', '.join(encodings)}"
        )
        self.encodings = tuple(encodings)


class FieldParseError(ValueError):
    """A header command that expects a number was given something else"""

    def __init__(self, field: str, value: str, expected: str) -> None:
        super().__init__(
            f"Invalid #{field} command : {expected} expected but {value!r} was "
            "found"
        )
        self.field = field
        self.value = value
        self.expected = expected

import warnings
from pathlib import Path
from typing import Dict, Optional

from bmstools.chart import ChartData
from bmstools.formats.load_tools import make_folder_loader

from .encoding import LEGACY_ENCODING, decode_chart
from .errors import DecodeError
from .header import parse_header
from .sequence import iter_subsequences

BMS_GLOB_PATTERNS = ("*.bms", "*.bme", "*.bml", "*.pms")


def load_bms(path: Path, *, legacy_encoding: str = LEGACY_ENCODING) -> ChartData:
    return parse_bms(path.read_bytes(), legacy_encoding=legacy_encoding)


def load_folder(
    path: Path, *, legacy_encoding: str = LEGACY_ENCODING
) -> Dict[Path, ChartData]:
    """Loads every chart in the folder, or just the given file. Files that
    can't be decoded are skipped when loading a whole folder"""

    def load_file(file_path: Path) -> Optional[ChartData]:
        try:
            return load_bms(file_path, legacy_encoding=legacy_encoding)
        except DecodeError as e:
            if not path.is_dir():
                raise
            warnings.warn(f"Skipping {file_path} : {e}")
            return None

    folder_loader = make_folder_loader(BMS_GLOB_PATTERNS, load_file)
    return folder_loader(path)


def parse_bms(data: bytes, *, legacy_encoding: str = LEGACY_ENCODING) -> ChartData:
    text = decode_chart(data, legacy_encoding)
    return parse_bms_text(text)


def parse_bms_text(text: str) -> ChartData:
    header = parse_header(text)
    return ChartData(
        player=header.player,
        genre=header.genre,
        title=header.title,
        artist=header.artist,
        bpm=header.bpm,
        play_level=header.play_level,
        sound_paths=header.sound_paths,
        subseqs=list(iter_subsequences(text)),
    )

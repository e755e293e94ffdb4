from pathlib import Path
from typing import Dict, Iterable, List, Optional, Protocol, TypeVar

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class FileLoader(Protocol[T_co]):
    """Function that excepts a path to a file as a parameter and returns its
    contents in whatever form suitable for the current format. Returns None
    when the file should be skipped"""

    def __call__(self, path: Path) -> Optional[T_co]:
        ...


class FolderLoader(Protocol[T]):
    """Function that expects a folder or a file path as a parameter. Loads
    either all matching files in the folder or just the given file depending
    on the argument"""

    def __call__(self, path: Path) -> Dict[Path, T]:
        ...


def make_folder_loader(
    glob_patterns: Iterable[str], file_loader: FileLoader[T]
) -> FolderLoader[T]:
    patterns = list(glob_patterns)

    def folder_loader(path: Path) -> Dict[Path, T]:
        files: Dict[Path, T] = {}
        if path.is_dir():
            paths: List[Path] = sorted(
                set(p for pattern in patterns for p in path.glob(pattern))
            )
        else:
            paths = [path]

        for p in paths:
            value = file_loader(p)
            if value is not None:
                files[p] = value

        return files

    return folder_loader

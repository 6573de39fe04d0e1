"""
Small filesystem helpers used around change sources.
"""

import shutil
from pathlib import Path
from typing import Iterable, List, Union

from loguru import logger

from .errors import UnsafePathError

PathLike = Union[str, Path]

_PANIC_PATHS = {'.', '/'}


def _check_removable(path: PathLike) -> None:
    if str(path) in _PANIC_PATHS:
        raise UnsafePathError(f"Refusing to remove {str(path)!r}")


def _remove(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    elif path.exists() or path.is_symlink():
        path.unlink()


def exists(path: PathLike, is_dir: bool = False) -> bool:
    """True if the path exists (and is a directory, when is_dir is set)."""
    p = Path(path)
    if is_dir:
        return p.is_dir()
    return p.exists()


def ls(path: PathLike) -> List[str]:
    """Names of the entries in a directory"""
    return sorted(child.name for child in Path(path).iterdir())


def rm(path: PathLike) -> None:
    """Remove a file or directory tree; missing paths are ignored."""
    _check_removable(path)
    _remove(Path(path))


def rmdirs(paths: Union[PathLike, Iterable[PathLike]]) -> None:
    """Remove one or more directory trees."""
    if isinstance(paths, (str, Path)):
        paths = [paths]
    paths = list(paths)
    # Check everything before deleting anything
    for path in paths:
        _check_removable(path)
    for path in paths:
        _remove(Path(path))


def findrm(directory: PathLike, *patterns: str) -> List[str]:
    """
    Remove the direct children of `directory` matching any glob pattern.

    Returns:
        Names of the removed entries
    """
    patterns = [p for p in patterns if p not in _PANIC_PATHS]
    removed = []
    for child in sorted(Path(directory).iterdir()):
        if any(child.match(p) for p in patterns):
            _remove(child)
            removed.append(child.name)
    if removed:
        logger.debug(f"Removed {len(removed)} entries from {directory}")
    return removed


def mkdir(path: PathLike) -> None:
    Path(path).mkdir(parents=True, exist_ok=True)


def find(directory: PathLike, name: str) -> List[str]:
    """Paths below `directory` whose name matches the glob `name`"""
    return sorted(str(p) for p in Path(directory).rglob(name))


def ensure_dir(path: PathLike) -> None:
    """
    Make sure `path` is a directory.

    A file already at `path` is removed and replaced by a directory.
    """
    p = Path(path)
    if p.is_dir():
        return
    if p.exists() or p.is_symlink():
        logger.debug(f"Replacing non-directory {p} with a directory")
        rm(p)
    mkdir(p)


def ensure_dir_for_file(path: PathLike) -> None:
    """Make sure the parent directory of a file exists"""
    ensure_dir(Path(path).parent)


def cp(src: PathLike, dst: PathLike) -> None:
    """Copy a file or a directory tree."""
    src, dst = Path(src), Path(dst)
    if src.is_dir():
        if dst.is_dir():
            dst = dst / src.name
        shutil.copytree(src, dst, dirs_exist_ok=True)
    else:
        shutil.copy2(src, dst)

"""
Data models for change tracking.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional

from .errors import DiffParseError
from .filenames import normalize_git_path


class ChangesMap(Mapping):
    """
    Read-only map of file path -> active flag.

    Paths are relative to the change source root. True means the file is
    present (added or modified), False means it was deleted.
    """

    __slots__ = ('_data',)

    def __init__(self, data: Optional[Mapping] = None):
        items: Dict[str, bool] = {}
        for path, active in (data or {}).items():
            if not isinstance(path, str):
                raise TypeError(f"ChangesMap keys must be str, got {type(path).__name__}")
            if not isinstance(active, bool):
                raise TypeError(f"ChangesMap values must be bool, got {type(active).__name__} for {path!r}")
            items[path] = active
        self._data = items

    def __getitem__(self, path: str) -> bool:
        return self._data[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self):
        return hash(frozenset(self._data.items()))

    def __repr__(self) -> str:
        return f"ChangesMap({self._data!r})"

    def active(self) -> List[str]:
        """Paths present in the source, sorted"""
        return sorted(p for p, a in self._data.items() if a)

    def deleted(self) -> List[str]:
        """Paths reported as deleted, sorted"""
        return sorted(p for p, a in self._data.items() if not a)

    def to_dict(self) -> Dict[str, bool]:
        return dict(self._data)

    def to_json(self, **kwargs: Any) -> str:
        return json.dumps(self._data, **kwargs)

    @classmethod
    def from_dict(cls, data: Mapping) -> 'ChangesMap':
        return cls(data)

    @classmethod
    def from_json(cls, text: str) -> 'ChangesMap':
        data = json.loads(text)
        if not isinstance(data, dict):
            raise TypeError("ChangesMap JSON must be an object")
        return cls(data)


class DiffStatus(Enum):
    """Git file status letters (see git-diff(1), --diff-filter)."""
    MODIFIED = 'M'
    ADDED = 'A'
    DELETED = 'D'
    RENAMED = 'R'
    COPIED = 'C'
    TYPE_CHANGED = 'T'
    UNMERGED = 'U'
    UNMODIFIED = ' '
    UNKNOWN = 'X'

    @property
    def is_two_path(self) -> bool:
        return self in (DiffStatus.RENAMED, DiffStatus.COPIED)


@dataclass(frozen=True)
class DiffEntry:
    """One line of `git diff --name-status` output"""
    status: DiffStatus
    code: str                       # status field as printed, e.g. "R079"
    from_path: str
    to_path: Optional[str] = None   # only for renames and copies
    score: Optional[int] = None     # similarity for renames and copies

    @classmethod
    def parse(cls, line: str) -> 'DiffEntry':
        """
        Parse a tab-separated name-status line.

        Examples:
            M       file.js
            R079    file-1.js       file-2.js

        Both paths are passed through normalize_git_path().
        """
        fields = line.split('\t')
        code = fields[0]
        if len(fields) < 2 or not code:
            raise DiffParseError(line)

        try:
            status = DiffStatus(code[0])
        except ValueError:
            status = DiffStatus.UNKNOWN

        if status.is_two_path:
            if len(fields) < 3:
                raise DiffParseError(line)
            score = int(code[1:]) if code[1:].isdigit() else None
            return cls(
                status=status,
                code=code,
                from_path=normalize_git_path(fields[1]),
                to_path=normalize_git_path(fields[2]),
                score=score
            )

        return cls(status=status, code=code, from_path=normalize_git_path(fields[1]))

    def changes(self) -> Dict[str, bool]:
        """Map entries contributed by this line"""
        if self.status is DiffStatus.RENAMED:
            return {self.from_path: False, self.to_path: True}
        if self.status is DiffStatus.COPIED:
            # The copy source is untouched
            return {self.to_path: True}
        return {self.from_path: self.code != 'D'}

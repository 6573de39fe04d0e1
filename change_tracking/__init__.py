"""
Incremental change detection for file sources.

Two kinds of source report which files were added, modified or removed:
- git_source.py: a branch of a git repository, diffed against a reference commit
- file_source.py: a plain directory, compared against the previous scan

Both return a ChangesMap of relative path -> active flag (False = deleted).
"""

from .errors import (
    ChangeTrackingError,
    DiffParseError,
    ExternalCommandError,
    ExternalProcessLaunchError,
    UnsafePathError,
)
from .file_source import FileChangeSource, open_file_source
from .filenames import normalize_git_path
from .fingerprint import fingerprint
from .git_source import GitChangeSource, open_git_source
from .models import ChangesMap, DiffEntry, DiffStatus

__all__ = [
    'ChangesMap',
    'DiffEntry',
    'DiffStatus',
    'GitChangeSource',
    'FileChangeSource',
    'open_git_source',
    'open_file_source',
    'normalize_git_path',
    'fingerprint',
    'ChangeTrackingError',
    'ExternalCommandError',
    'ExternalProcessLaunchError',
    'DiffParseError',
    'UnsafePathError',
]

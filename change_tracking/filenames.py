"""
Decoding of the quoted filenames git prints for unusual paths.

With core.quotePath (the default), git wraps a path containing non-ASCII or
control characters in double quotes and writes each such byte as a
backslash followed by three octal digits, e.g. "caf\\303\\251.txt".
See the "Short Format" section of git-status(1).
"""

import re

# Octal byte escapes first, then the single-character C escapes git uses.
_ESCAPE_RE = re.compile(r'\\([0-7]{3}|[\\"abfnrtv])')

_SIMPLE_ESCAPES = {
    '\\': b'\\',
    '"': b'"',
    'a': b'\a',
    'b': b'\b',
    'f': b'\f',
    'n': b'\n',
    'r': b'\r',
    't': b'\t',
    'v': b'\v',
}


def _unescape(body: str) -> bytes:
    out = bytearray()
    pos = 0
    for match in _ESCAPE_RE.finditer(body):
        out += body[pos:match.start()].encode('utf-8', errors='surrogateescape')
        token = match.group(1)
        if len(token) == 3:
            value = int(token, 8)
            if value > 0xFF:
                # Not a byte; leave the sequence as written
                out += match.group(0).encode('utf-8')
            else:
                out.append(value)
        else:
            out += _SIMPLE_ESCAPES[token]
        pos = match.end()
    out += body[pos:].encode('utf-8', errors='surrogateescape')
    return bytes(out)


def is_quoted(path: str) -> bool:
    """True if git has wrapped the path in double quotes."""
    return len(path) >= 2 and path[0] == '"' and path[-1] == '"'


def normalize_git_path(path: str) -> str:
    """
    Return the real filename for a path as printed by git.

    Unquoted paths are returned unchanged. Quoted paths lose their quotes and
    have their escape sequences replaced by the bytes they encode; the bytes
    are then read as UTF-8, keeping any invalid byte as a surrogate escape.
    """
    if not is_quoted(path):
        return path
    raw = _unescape(path[1:-1])
    return raw.decode('utf-8', errors='surrogateescape')

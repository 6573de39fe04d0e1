"""
Short content fingerprints.
"""

import hashlib
import hmac
import json
from typing import Any, Optional

from .config import settings


def fingerprint(data: Any, length: Optional[int] = None) -> str:
    """
    Fingerprint a value as a fixed-length hex string.

    Non-string values are first serialized to compact JSON. The string is
    used as the key of an HMAC-SHA256 over an empty message and the first
    `length` hex characters of the digest are returned.
    """
    if length is None:
        length = settings.fingerprint_length
    if isinstance(data, str):
        text = data
    else:
        text = json.dumps(data, separators=(',', ':'), ensure_ascii=False)
    digest = hmac.new(text.encode('utf-8'), b'', hashlib.sha256).hexdigest()
    return digest[:length]

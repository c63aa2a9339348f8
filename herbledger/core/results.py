"""
Result set builder - splices raw stored records into one JSON array.
"""

import json
from typing import Iterable

from .store import ResultRow


def build_result_set(rows: Iterable[ResultRow]) -> bytes:
    """Assemble rows into ``[{"Key":"<key>", "Record":<raw bytes>},...]``.

    Record payloads are written verbatim, never decoded, so each one must
    already be a valid JSON value. Empty input yields ``[]``.
    """
    buffer = bytearray(b"[")
    member_written = False

    for key, value in rows:
        # Comma before every member except the first
        if member_written:
            buffer += b","
        buffer += b'{"Key":'
        buffer += json.dumps(key).encode("utf-8")
        buffer += b', "Record":'
        buffer += value
        buffer += b"}"
        member_written = True

    buffer += b"]"
    return bytes(buffer)

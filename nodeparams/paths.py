"""Dotted-path lookup into nested parameter values.

Paths look like ``options.headers[0].name``.  Keys containing dots or
brackets are written quoted inside brackets: ``options["content.type"]``.
Missing keys, out-of-range indices and walks through scalars all resolve
to ``None``.
"""

import re
from typing import Any

_SEGMENT = re.compile(r"""\[\s*(["'])(.*?)\1\s*\]|([^.\[\]"']+)""")


def split_path(path: str) -> list[str]:
    """``'a.b[2]["c.d"]'`` → ``["a", "b", "2", "c.d"]``."""
    return [
        match.group(2) if match.group(1) else match.group(3)
        for match in _SEGMENT.finditer(path or "")
    ]


def join_path(base: str, name: str) -> str:
    """Append *name* to *base* with a dot, skipping the dot for an empty base."""
    return f"{base}.{name}" if base else name


def get_path(values: Any, path: str) -> Any:
    """Return the value at *path* inside *values*, or None."""
    current = values
    for segment in split_path(path):
        if isinstance(current, dict):
            current = current.get(segment)
        elif isinstance(current, list) and segment.isdigit():
            index = int(segment)
            current = current[index] if index < len(current) else None
        else:
            return None
        if current is None:
            return None
    return current

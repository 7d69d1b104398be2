from __future__ import annotations

import html
from typing import Any, Mapping, Optional


def decode_html(s: Optional[str]) -> str:
    """Decode HTML entities (``&amp;``, ``&quot;``, ``&#039;``...). Plain text passes through unchanged."""
    return html.unescape(s or "")


def get_ci(doc: Mapping[str, Any], key: str, default: Any = None) -> Any:
    if key in doc:
        return doc[key]
    k = key.lower()
    for name, value in doc.items():
        if isinstance(name, str) and name.lower() == k:
            return value
    return default

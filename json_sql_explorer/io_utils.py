from __future__ import annotations

import json
from typing import Any, List

from .errors import ParseError


def read_text_content(file_obj) -> str:
    """Read an uploaded file, file-like object or path as UTF-8 text."""
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        content = file_obj.read()
        if isinstance(content, bytes):
            content = content.decode('utf-8-sig')
        return content

    path = file_obj.name if hasattr(file_obj, 'name') else file_obj
    with open(path, 'r', encoding='utf-8-sig') as f:
        return f.read()


def normalize_records(text: str) -> List[Any]:
    """Parse JSON text into an ordered list of records.

    An array yields its elements in order; any other value is wrapped as a
    single record.
    """
    try:
        parsed = json.loads(text)
    except (json.JSONDecodeError, TypeError) as exc:
        raise ParseError(f"Invalid JSON: {exc}") from exc

    if isinstance(parsed, list):
        return parsed
    return [parsed]

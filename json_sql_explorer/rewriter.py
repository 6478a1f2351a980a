from __future__ import annotations

import re
from typing import Any, List, Tuple

from .engine import placeholder
from .errors import ValidationError

IDENT_CHARS = 'A-Za-z0-9_'


def alias_pattern(alias: str) -> re.Pattern:
    """Whole-word, case-sensitive matcher for a table alias.

    The alias is escaped, so metacharacters match literally. A match must not
    touch an identifier character on either side.
    """
    return re.compile(rf"(?<![{IDENT_CHARS}]){re.escape(alias)}(?![{IDENT_CHARS}])")


def rewrite(sql_text: str, alias: str, records: List[Any] | None = None) -> Tuple[str, List[Any]]:
    """Point every whole-word `alias` in `sql_text` at parameter 0.

    Returns the rewritten SQL and the parameter list to bind with it. This is
    textual: an alias spelled inside a string literal or used as a CTE name is
    rewritten too.
    """
    if not alias or not alias.strip():
        raise ValidationError("Table alias must not be blank")

    token = placeholder(0)
    rewritten = alias_pattern(alias.strip()).sub(lambda _m: token, sql_text)
    return rewritten, [list(records or [])]

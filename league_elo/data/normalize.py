"""Clean-up of team names and score cells taken from pasted feeds.

League sites export team names with stray whitespace, non-breaking spaces
and HTML entities (``Fire &amp; Ice``). Names are cleaned the same way
everywhere so one club never shows up as two table rows.
"""

from __future__ import annotations

import html as _html
import re
from typing import Optional

_WHITESPACE_RE = re.compile(r"\s+")


def clean_team_name(name: str) -> str:
    """Decode HTML entities and collapse whitespace.

    Examples::

        >>> clean_team_name("  Fire &amp; Ice ")
        'Fire & Ice'
        >>> clean_team_name("U10\\u00a0Boys  Red")
        'U10 Boys Red'
    """
    if not name:
        return ""
    s = _html.unescape(str(name))
    s = _WHITESPACE_RE.sub(" ", s)
    return s.strip()


def parse_score(value) -> Optional[int]:
    """Parse a score cell.

    Returns ``None`` for blank or non-numeric cells. Integral floats such
    as ``"2.0"`` are accepted; fractional and negative values are not scores.
    """
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if not number.is_integer() or number < 0:
        return None
    return int(number)

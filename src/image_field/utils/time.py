"""
Time-related utilities for the image field.

Storage keys may start with a date prefix rendered from the field's
``path_format``. Formats are accepted either as strftime strings
(``%Y/%m/%d/``) or in the moment.js token style (``YYYY/MM/DD/``), where
text inside square brackets is emitted literally.
"""

import re
from datetime import datetime, timezone

_MOMENT_TOKENS = {
    "YYYY": "%Y",
    "YY": "%y",
    "MM": "%m",
    "DD": "%d",
    "HH": "%H",
    "mm": "%M",
    "ss": "%S",
}

_MOMENT_PATTERN = re.compile(r"\[[^\]]*\]|YYYY|YY|MM|DD|HH|mm|ss")


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def _to_strftime(fmt: str) -> str:
    parts: list[str] = []
    position = 0

    for match in _MOMENT_PATTERN.finditer(fmt):
        parts.append(fmt[position : match.start()])
        token = match.group(0)
        if token.startswith("["):
            parts.append(token[1:-1])
        else:
            parts.append(_MOMENT_TOKENS[token])
        position = match.end()

    parts.append(fmt[position:])
    return "".join(parts)


def format_date_prefix(fmt: str, moment: datetime | None = None) -> str:
    """Render a storage key date prefix.

    Supported moment tokens are YYYY, YY, MM, DD, HH, mm and ss. Other
    letters, including single-letter tokens such as M, D or H, are copied
    as literal text; use strftime directives for anything else.

    Example:
        format_date_prefix("YYYY/MM/", datetime(2024, 1, 15)) -> "2024/01/"
    """
    if not fmt:
        return ""

    moment = moment or utc_now()
    if "%" in fmt:
        return moment.strftime(fmt)
    return moment.strftime(_to_strftime(fmt))

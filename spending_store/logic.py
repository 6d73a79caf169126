import math
import re
from datetime import date


_LEADING_NUMBER_RE = re.compile(
    r"^\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)


def parse_amount(value) -> float:
    """Parse the leading decimal number of ``value``.

    Mirrors a lenient form parser: ``"15.75"`` and ``"15.75 USD"`` both give
    ``15.75``; input with no leading number gives ``nan`` rather than raising.
    Non-string values such as ``Decimal`` are parsed from their ``str()``.
    """
    if isinstance(value, bool) or value is None:
        return math.nan
    if isinstance(value, float):
        return value
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            return -math.inf if value < 0 else math.inf
    match = _LEADING_NUMBER_RE.match(value if isinstance(value, str) else str(value))
    if match is None:
        return math.nan
    token = match.group(1)
    if token.lstrip("+-") == "Infinity":
        return -math.inf if token.startswith("-") else math.inf
    # float() saturates to +/-inf on overflow for string input.
    return float(token)


def format_date_for_display(date_str: str) -> str:
    """Rearrange ``YYYY-MM-DD`` into ``MM-DD-YYYY`` without validating it."""
    parts = (date_str or "").split("-")
    year, month, day = (parts + ["", "", ""])[:3]
    return f"{month}-{day}-{year}"


def date_sort_key(date_str: str) -> date:
    # Unparsable dates rank below every real calendar date.
    try:
        return date.fromisoformat(date_str)
    except (TypeError, ValueError):
        return date.min


def validate_limit(limit: int) -> int:
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise ValueError("limit must be an integer")
    if limit < 0:
        raise ValueError("limit must be non-negative")
    return limit

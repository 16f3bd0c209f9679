import unicodedata

from pricechart.core.errors import MissingParameter
from pricechart.models import INTERVALS

def normalize_symbol(raw) -> str:
    s = unicodedata.normalize("NFKC", str(raw or ""))
    s = s.replace("\u00A0", " ").strip()           # remove NBSP, trim
    s = "".join(ch for ch in s if not ch.isspace())# remove ALL spaces
    return s.lower()

def require_symbol(raw) -> str:
    s = normalize_symbol(raw)
    if not s:
        raise MissingParameter("Missing required query parameter: symbol")
    return s

def require_interval(raw) -> str:
    s = str(raw or "").strip().lower()
    if s not in INTERVALS:
        raise MissingParameter(f"Invalid interval {raw!r}; expected one of d, w, m")
    return s

def require_days(raw) -> int:
    try:
        days = int(raw)
    except (TypeError, ValueError):
        raise MissingParameter(f"Invalid days {raw!r}; expected a positive integer")
    if days <= 0:
        raise MissingParameter(f"Invalid days {raw!r}; expected a positive integer")
    return days

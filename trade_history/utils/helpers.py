from typing import Any, List, Optional


def parse_bool(value: Any, default: bool = False) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    s = str(value).strip().lower()
    if s in ("1", "true", "yes", "y", "on"):
        return True
    if s in ("0", "false", "no", "n", "off"):
        return False
    return default


def parse_int(value: Any, default: Optional[int] = None) -> Optional[int]:
    try:
        if value is None or value == "":
            return default
        return int(float(value))
    except (TypeError, ValueError):
        return default


def parse_list(value: Any, sep: str = ",", default: Optional[List[str]] = None) -> List[str]:
    """Split a delimited env value into stripped, non-empty items."""
    if value is None:
        return list(default or [])
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value]
    items = [part.strip() for part in str(value).split(sep)]
    items = [part for part in items if part]
    return items or list(default or [])

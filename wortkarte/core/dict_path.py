import copy
from typing import Any, List


def get_in(dct: dict, path: List[str], default=None):
    cur = dct
    for k in path:
        if not isinstance(cur, dict) or k not in cur:
            return default
        cur = cur[k]
    return cur


def merge_in(base: dict, override: dict) -> dict:
    """Return a copy of `base` with `override` merged in, nested dicts key by key."""
    out = copy.deepcopy(base)
    for k, v in (override or {}).items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = merge_in(out[k], v)
        else:
            out[k] = v
    return out


def float_cast(v: Any, default: float) -> float:
    try:
        return float(v)
    except (TypeError, ValueError):
        return float(default)

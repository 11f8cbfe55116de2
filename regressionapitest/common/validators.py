from __future__ import annotations
import json
from typing import Optional

def _reject_constant(name):
    # NaN / Infinity / -Infinity are not JSON
    raise ValueError(f"invalid JSON constant {name}")

def validate_not_null(body: str) -> Optional[str]:
    if body == "null":
        return "the response was null"
    return None

def validate_json(body: str) -> Optional[str]:
    try:
        json.loads(body, parse_constant=_reject_constant)
        return None
    except (ValueError, RecursionError):
        # too deeply nested to decode counts as invalid
        return "the response was not a valid Json"

def validate_server_address(addr: Optional[str]) -> Optional[str]:
    if not addr or not addr.strip():
        return "server address missing"
    return None

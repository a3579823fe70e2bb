"""Helpers for reading claims out of decoded JWT payloads."""

from __future__ import annotations

from typing import Any, Mapping


def parse_epoch_claim(payload: Mapping[str, Any], claim: str = "exp") -> int | None:
    """
    Read an epoch-seconds claim (``exp``, ``iat``, ``nbf``) as an int.

    Storage signers are not consistent about the claim type, so ints, floats
    and numeric strings are all accepted. Anything else (including bools)
    yields None.
    """
    value = payload.get(claim)
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return int(value)
    try:
        return int(str(value).strip())
    except ValueError:
        return None

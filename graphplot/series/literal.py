"""Literal series parser for comma-separated numeric text."""

import math
from typing import List


def parse_literal(text: str) -> List[float]:
    """Parse ``"10, 20, 30"`` into ``[10.0, 20.0, 30.0]``.

    Tokens that are not finite numbers (including empty tokens) are
    dropped; order of the remaining tokens is preserved. An empty list
    is a valid result.
    """
    values: List[float] = []
    for token in (text or "").split(","):
        token = token.strip()
        if not token:
            continue
        try:
            value = float(token)
        except ValueError:
            continue
        if math.isfinite(value):
            values.append(value)
    return values

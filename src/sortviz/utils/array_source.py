"""Array input: parsing typed text, random generation and size scaling."""
from __future__ import annotations

import math
import random
import re
from typing import Sequence

from sortviz.constants import (
    MAX_ELEMENTS, NODE_MIN_SIZE, NODE_SIZE_SPAN, RANDOM_VALUE_MAX, RANDOM_VALUE_MIN,
)
from sortviz.errors import EmptyInput, InvalidCount, InvalidToken, TooManyValues

_SEPARATORS = re.compile(r"[,\s]+")


def parse_values(text: str, limit: int = MAX_ELEMENTS) -> list[float]:
    """Parse comma/whitespace separated numbers.

    Raises ``EmptyInput``, ``InvalidToken`` (first bad token, including
    non-finite values) or ``TooManyValues``.
    """
    text = (text or "").strip()
    if not text:
        raise EmptyInput()
    values: list[float] = []
    for token in _SEPARATORS.split(text):
        if not token:
            continue
        try:
            value = float(token)
        except ValueError:
            raise InvalidToken(token) from None
        if not math.isfinite(value):
            raise InvalidToken(token)
        values.append(value)
    if len(values) > limit:
        raise TooManyValues(len(values), limit)
    return values


def random_values(count: int, rng: random.Random | None = None) -> list[int]:
    if count < 0:
        raise InvalidCount(count)
    if count > MAX_ELEMENTS:
        raise TooManyValues(count, MAX_ELEMENTS)
    rng = rng or random.Random()
    return [rng.randint(RANDOM_VALUE_MIN, RANDOM_VALUE_MAX) for _ in range(count)]


def visual_sizes(values: Sequence[float]) -> list[int]:
    """Scale values to node diameters in [NODE_MIN_SIZE, NODE_MIN_SIZE + NODE_SIZE_SPAN]."""
    if not values:
        return []
    low = min(values)
    span = (max(values) - low) or 1
    return [NODE_MIN_SIZE + round((v - low) / span * NODE_SIZE_SPAN) for v in values]


def format_value(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)

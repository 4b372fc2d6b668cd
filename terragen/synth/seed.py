"""
Seed derivation.

Turns whatever the caller hands us (a number or a string) into a stable
numeric seed. Numeric-looking strings ("42") count as numbers; other
strings go through MD5 so the result is the same on every platform and in
every process, unlike Python's salted hash().
"""

import hashlib
import logging
import math
import numbers
from typing import Optional, Union

from ..errors import InvalidArgument

logger = logging.getLogger(__name__)

Seed = Union[int, float, str]


def is_number(value) -> bool:
    # bool is an int subclass but never a sensible seed/size/persistence
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_finite(value) -> bool:
    # ints of any size are finite; math.isfinite would overflow on them
    return isinstance(value, numbers.Integral) or math.isfinite(value)


def parse_number(text: str) -> Union[int, float, None]:
    """int or float for numeric-looking text ("42", " 1e3"), else None."""
    for cast in (int, float):
        try:
            value = cast(text)
        except ValueError:
            continue
        # "nan" and "inf" parse as floats but are names, not numbers
        return value if is_finite(value) else None
    return None


def text_to_seed(text: str) -> int:
    """Last 8 hex digits of the MD5 digest, as an unsigned 32-bit integer."""
    digest = hashlib.md5(text.encode("utf-8")).hexdigest()
    return int(digest[-8:], 16)


class SeedDeriver:
    """Holds the raw seed and its derived numeric form."""

    def __init__(self) -> None:
        self._raw: Optional[Seed] = None
        self._numeric: Union[int, float, None] = None

    @property
    def raw(self) -> Optional[Seed]:
        return self._raw

    @property
    def numeric(self) -> Union[int, float, None]:
        return self._numeric

    def is_set(self) -> bool:
        return self._raw is not None

    def set(self, value: Seed) -> None:
        if is_number(value):
            if not is_finite(value):
                raise InvalidArgument("map_seed", "a finite number", value)
            numeric = value
        elif isinstance(value, str):
            parsed = parse_number(value)
            numeric = text_to_seed(value) if parsed is None else parsed
        else:
            raise InvalidArgument("map_seed", "string or numeric", value)

        self._raw = value
        self._numeric = numeric
        logger.debug(f"Seed set to {value!r} (numeric {numeric})")

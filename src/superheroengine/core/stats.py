"""
Safe numeric read for powerstats. Single point of truth for the default-to-zero rule.

Raw stat values come straight from the hero JSON and may be numbers, numeric strings,
null, missing, or garbage. read_stat() classifies each one as NUMBER, MISSING, or
INVALID; MISSING and INVALID both read as 0 and never raise.
"""

import math
import numbers
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Union

import pandas as pd

# Canonical comparison order. Extraction, output ordering, table columns and
# renderers all iterate this tuple.
CANONICAL_STATS = ("intelligence", "strength", "speed", "durability", "power", "combat")

Number = Union[int, float]

# Plain decimal: sign, digits, optional fraction, optional exponent. No "_", hex, or "inf"/"nan".
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_INTEGER_RE = re.compile(r"[+-]?\d+")


class StatKind(Enum):
    NUMBER = "number"
    MISSING = "missing"
    INVALID = "invalid"


@dataclass(frozen=True)
class StatReading:
    """Result of normalizing one raw stat value."""

    kind: StatKind
    value: Number  # 0 unless kind is NUMBER
    raw: Any = None

    @property
    def ok(self) -> bool:
        return self.kind is StatKind.NUMBER


def _normalize(x: float) -> Number:
    """Integral floats become int (30.0 -> 30); others stay float."""
    return int(x) if x.is_integer() else x


def _missing(raw: Any) -> StatReading:
    return StatReading(kind=StatKind.MISSING, value=0, raw=raw)


def _invalid(raw: Any) -> StatReading:
    return StatReading(kind=StatKind.INVALID, value=0, raw=raw)


def read_stat(raw: Any) -> StatReading:
    """
    Classify and coerce a raw stat value.

    None / NaN / pd.NA / blank string -> MISSING (0).
    int / float / numpy number (not bool) -> NUMBER; non-finite -> INVALID (0).
    str -> stripped, parsed as plain decimal -> NUMBER; otherwise INVALID (0).
    Anything else (bool, list, dict, ...) -> INVALID (0).
    """
    if raw is None:
        return _missing(raw)
    if isinstance(raw, str):
        text = raw.strip()
        if not text:
            return _missing(raw)
        if not _DECIMAL_RE.fullmatch(text):
            return _invalid(raw)
        if _INTEGER_RE.fullmatch(text):
            # Exact, no float round-trip for long digit strings
            try:
                return StatReading(kind=StatKind.NUMBER, value=int(text), raw=raw)
            except ValueError:
                return _invalid(raw)  # beyond the interpreter's int-string digit limit
        x = float(text)
        if not math.isfinite(x):
            return _invalid(raw)
        return StatReading(kind=StatKind.NUMBER, value=_normalize(x), raw=raw)
    if isinstance(raw, bool):
        return _invalid(raw)
    if pd.api.types.is_scalar(raw) and pd.isna(raw):
        return _missing(raw)
    if isinstance(raw, numbers.Integral):
        return StatReading(kind=StatKind.NUMBER, value=int(raw), raw=raw)
    if isinstance(raw, numbers.Real):
        x = float(raw)
        if not math.isfinite(x):
            return _invalid(raw)
        return StatReading(kind=StatKind.NUMBER, value=_normalize(x), raw=raw)
    return _invalid(raw)


def safe_stat(raw: Any) -> Number:
    """Raw value -> definite number; 0 when missing or invalid."""
    return read_stat(raw).value


def stat_value(powerstats: Any, name: str) -> Number:
    """Safe read of one named stat from a powerstats container that may itself be missing or junk."""
    if not isinstance(powerstats, Mapping):
        return 0
    return safe_stat(powerstats.get(name))

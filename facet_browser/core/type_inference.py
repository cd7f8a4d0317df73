from __future__ import annotations

import math
import re
import unicodedata
from enum import Enum
from typing import Iterable, List, Optional, Tuple

SAMPLE_SIZE = 100
NUMERIC_RATIO = 0.8

_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_RADIX_RE = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_INFINITY_RE = re.compile(r"([+-]?)Infinity")


class ColumnKind(str, Enum):
    NUMBER = "number"
    TEXT = "text"


def parse_number(value: str) -> Optional[float]:
    """
    Parse a cell value as a number.

    Accepts plain decimal and exponent notation, unsigned 0x/0o/0b literals
    and "Infinity" with an optional sign. Digit separators, "inf" and "nan"
    are not numbers. Returns None for blank or non-numeric strings.
    """
    text = value.strip()
    if not text:
        return None
    if _DECIMAL_RE.fullmatch(text):
        return float(text)
    if _RADIX_RE.fullmatch(text):
        try:
            return float(int(text, 0))
        except OverflowError:
            return math.inf
    infinity = _INFINITY_RE.fullmatch(text)
    if infinity:
        return -math.inf if infinity.group(1) == "-" else math.inf
    return None


def infer_column_kind(values: Iterable[str]) -> ColumnKind:
    """
    Infer the kind of a column from its values.

    Only the first SAMPLE_SIZE non-empty values are inspected. The column is
    NUMBER when at least NUMERIC_RATIO of the sample parses as a number,
    otherwise TEXT. A column without any non-empty value is TEXT.
    """
    sample: List[str] = []
    for value in values:
        if value is None or value == "":
            continue
        sample.append(value)
        if len(sample) >= SAMPLE_SIZE:
            break

    if not sample:
        return ColumnKind.TEXT

    numeric = sum(1 for v in sample if parse_number(v) is not None)
    return ColumnKind.NUMBER if numeric / len(sample) >= NUMERIC_RATIO else ColumnKind.TEXT


def format_column_label(key: str) -> str:
    """Turn a column key into a readable label: 'firstName' -> 'First Name'."""
    label = re.sub(r"([A-Z])", r" \1", key)
    label = re.sub(r"\b\w", lambda m: m.group(0).upper(), label)
    return label.strip()


def text_sort_key(value: str) -> Tuple[str, str, str]:
    # accent/case-insensitive first, lower case before upper case on ties
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), value.casefold(), value.swapcase()


def sort_values(values: Iterable[str], kind: ColumnKind) -> List[str]:
    """
    Deterministically order distinct column values for display.

    NUMBER: ascending numeric value; values that don't parse come last in
    text order. TEXT: locale-like text order (see text_sort_key).
    """
    if kind is ColumnKind.NUMBER:
        numeric: List[Tuple[float, str]] = []
        other: List[str] = []
        for v in values:
            number = parse_number(v)
            if number is None:
                other.append(v)
            else:
                numeric.append((number, v))
        numeric.sort(key=lambda pair: (pair[0], text_sort_key(pair[1])))
        return [v for _, v in numeric] + sorted(other, key=text_sort_key)

    return sorted(values, key=text_sort_key)

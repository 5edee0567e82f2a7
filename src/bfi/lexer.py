from __future__ import annotations

from enum import Enum
from typing import Iterable, List


class Token(Enum):
    NEXT_CELL = '>'
    PREVIOUS_CELL = '<'
    INCREMENT_DATA = '+'
    DECREMENT_DATA = '-'
    OUTPUT_DATA = '.'
    INPUT_DATA = ','
    BEGIN_LOOP = '['
    END_LOOP = ']'


BF_OPS = frozenset(t.value for t in Token)


def is_code_char(ch: str) -> bool:
    return ch in BF_OPS


def tokenize(source: Iterable[str]) -> List[Token]:
    """Map each command character to its token, dropping everything else."""
    return [Token(ch) for ch in source if ch in BF_OPS]

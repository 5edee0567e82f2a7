from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

from .lexer import Token, tokenize


# ---------------- Instruction nodes ----------------
@dataclass(frozen=True)
class NextCell:
    pass


@dataclass(frozen=True)
class PreviousCell:
    pass


@dataclass(frozen=True)
class IncrementData:
    pass


@dataclass(frozen=True)
class DecrementData:
    pass


@dataclass(frozen=True)
class OutputData:
    pass


@dataclass(frozen=True)
class InputData:
    pass


@dataclass(frozen=True)
class Loop:
    body: Tuple["Instruction", ...] = ()


Instruction = Union[NextCell, PreviousCell, IncrementData, DecrementData, OutputData, InputData, Loop]

_PRIMITIVES = {
    Token.NEXT_CELL: NextCell(),
    Token.PREVIOUS_CELL: PreviousCell(),
    Token.INCREMENT_DATA: IncrementData(),
    Token.DECREMENT_DATA: DecrementData(),
    Token.OUTPUT_DATA: OutputData(),
    Token.INPUT_DATA: InputData(),
}


# ---------------- Parser: tokens -> tree ----------------
def parse_tokens(tokens: Iterable[Token]) -> Tuple[Instruction, ...]:
    """
    Build the instruction tree from a token stream.

    A ']' closes the innermost open loop. A ']' with no open loop ends the
    scan at top level, so anything after it is never parsed. Loops still open
    when the tokens run out are closed implicitly with whatever they collected.
    """
    stack: List[List[Instruction]] = [[]]

    for tok in tokens:
        if tok is Token.BEGIN_LOOP:
            stack.append([])
        elif tok is Token.END_LOOP:
            if len(stack) == 1:
                break
            body = stack.pop()
            stack[-1].append(Loop(tuple(body)))
        else:
            stack[-1].append(_PRIMITIVES[tok])

    while len(stack) > 1:
        body = stack.pop()
        stack[-1].append(Loop(tuple(body)))
    return tuple(stack[0])


def parse(source: Iterable[str]) -> Tuple[Instruction, ...]:
    return parse_tokens(tokenize(source))


def nesting_depth(instructions: Iterable[Instruction]) -> int:
    depth = 0
    pending = [(tuple(instructions), 0)]
    while pending:
        nodes, level = pending.pop()
        depth = max(depth, level)
        for n in nodes:
            if isinstance(n, Loop):
                pending.append((n.body, level + 1))
    return depth


@dataclass(frozen=True)
class Program:
    instructions: Tuple[Instruction, ...]

    @classmethod
    def parse(cls, source: Iterable[str]) -> "Program":
        return cls(parse(source))

    @property
    def depth(self) -> int:
        return nesting_depth(self.instructions)

    def __len__(self) -> int:
        return len(self.instructions)

    def __iter__(self):
        return iter(self.instructions)

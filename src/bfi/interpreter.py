"""
Tree-walking executor for parsed programs.

    >>> import io
    >>> out = io.BytesIO()
    >>> Interpreter(io.BytesIO(), out, 30000).execute(HELLO_WORLD)
    >>> out.getvalue()
    b'Hello World!\\n'
"""
from __future__ import annotations

import logging
from typing import BinaryIO, List, Sequence, Union

from .parser import (
    DecrementData,
    IncrementData,
    InputData,
    Instruction,
    Loop,
    NextCell,
    OutputData,
    PreviousCell,
    Program,
)
from .tape import Tape

logger = logging.getLogger(__name__)

DEFAULT_MEMORY_SIZE = 30000

HELLO_WORLD = (
    "++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]"
    ">>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++."
)


class Interpreter:
    """Runs programs against one tape, reading from `input` and writing to `output`.

    `input` needs a ``read(n)`` returning bytes (empty or None when nothing is
    available); `output` needs a ``write(bytes)``. The tape is cleared at the
    start of every execution.
    """

    def __init__(self, input: BinaryIO, output: BinaryIO, memory_size: int = DEFAULT_MEMORY_SIZE):
        self.input = input
        self.output = output
        self.tape = Tape(memory_size)
        self._starved = False
        self._written = 0

    def execute(self, source: str) -> None:
        self.run(Program.parse(source))

    def run(self, program: Union[Program, Sequence[Instruction]]) -> None:
        if not isinstance(program, Program):
            program = Program(tuple(program))
        logger.debug("executing %d top-level instructions (loop depth %d)", len(program), program.depth)
        self.tape.clear()
        self._starved = False
        self._written = 0
        self._execute_instructions(program.instructions)
        logger.debug("execution finished, %d bytes written", self._written)

    def _execute_instructions(self, instructions: Sequence[Instruction]) -> None:
        tape = self.tape
        # each frame is [body, index]; a parent's index stays on its Loop while the body runs
        frames: List[list] = [[instructions, 0]]

        while frames:
            frame = frames[-1]
            body, pc = frame

            if pc >= len(body):
                if len(frames) > 1 and tape.read() != 0:
                    frame[1] = 0
                else:
                    frames.pop()
                    if frames:
                        frames[-1][1] += 1
                continue

            node = body[pc]
            if isinstance(node, Loop):
                if tape.read() != 0:
                    frames.append([node.body, 0])
                else:
                    frame[1] += 1
                continue

            if isinstance(node, NextCell):
                tape.advance()
            elif isinstance(node, PreviousCell):
                tape.retreat()
            elif isinstance(node, IncrementData):
                tape.increment()
            elif isinstance(node, DecrementData):
                tape.decrement()
            elif isinstance(node, OutputData):
                self._write_byte(tape.read())
            elif isinstance(node, InputData):
                self._read_byte()
            else:
                raise TypeError(f"unknown instruction: {node!r}")
            frame[1] += 1

    def _write_byte(self, value: int) -> None:
        self.output.write(bytes((value,)))
        self._written += 1

    def _read_byte(self) -> None:
        data = self.input.read(1)
        if data:
            self.tape.write(data[0])
        elif not self._starved:
            self._starved = True
            logger.debug("input exhausted at cell %d, leaving cells unchanged", self.tape.current_idx)

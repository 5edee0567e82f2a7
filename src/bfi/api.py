from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional

from .errors import make_config_error, make_source_error
from .interpreter import DEFAULT_MEMORY_SIZE, Interpreter
from .parser import Program


@dataclass(frozen=True)
class RunOptions:
    memory_size: int = DEFAULT_MEMORY_SIZE
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if isinstance(self.memory_size, bool) or not isinstance(self.memory_size, int) or self.memory_size < 1:
            raise make_config_error(field='memory_size', value=self.memory_size)


@dataclass(frozen=True)
class RunResult:
    output: bytes
    program: Program


def read_source(path: str | Path, *, encoding: str = "utf-8") -> str:
    p = Path(path)
    try:
        return p.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise make_source_error(path=str(path), exc=e) from e


def run_string(source: str, *, input: bytes = b"", options: Optional[RunOptions] = None) -> RunResult:
    opts = options or RunOptions()
    out = io.BytesIO()
    program = Program.parse(source)
    Interpreter(io.BytesIO(input), out, opts.memory_size).run(program)
    return RunResult(output=out.getvalue(), program=program)


def run_file(path: str | Path, *, input: bytes = b"", options: Optional[RunOptions] = None) -> RunResult:
    opts = options or RunOptions()
    return run_string(read_source(path, encoding=opts.encoding), input=input, options=opts)


def run(path: str | Path, input: BinaryIO, output: BinaryIO, *, options: Optional[RunOptions] = None) -> Program:
    """Execute the program in `path` against caller-supplied byte streams."""
    opts = options or RunOptions()
    program = Program.parse(read_source(path, encoding=opts.encoding))
    Interpreter(input, output, opts.memory_size).run(program)
    return program

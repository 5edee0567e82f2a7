#!/usr/bin/env python3
"""
Tests for executing programs against the tape and byte streams.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import io

import pytest

from bfi import BFIConfigError, Interpreter, Program
from bfi.interpreter import HELLO_WORLD


NON_INSTRUCTIONS = " !\"#$%&'()*/0123456789:;=?@ABCDEFGHIJKLMNOPQRSTUVWXYZ\\^_`abcdefghijklmnopqrstuvwxyz{|}~"


def execute(source, input_data=b"", memory_size=1):
    out = io.BytesIO()
    interpreter = Interpreter(io.BytesIO(input_data), out, memory_size)
    interpreter.execute(source)
    return out.getvalue(), interpreter


class _ClosedSink:
    def write(self, data):
        raise ValueError("I/O operation on closed file.")


class _NoDataYet:
    """Non-blocking stream with nothing buffered."""

    def read(self, n):
        return None


def test_empty_program():
    output, _ = execute("")
    assert output == b""


def test_non_instructions_produce_nothing():
    output, _ = execute(NON_INSTRUCTIONS)
    assert output == b""


def test_default_cell_value_is_zero():
    output, _ = execute(".")
    assert output == b"\x00"


def test_input_then_output():
    output, _ = execute(",.", b"\x01")
    assert output == b"\x01"


def test_consecutive_inputs():
    output, _ = execute(",.,.", b"\x01\x02")
    assert output == b"\x01\x02"


def test_starved_input_leaves_cell_unchanged():
    output, _ = execute(",.")
    assert output == b"\x00"
    output, _ = execute("+++,.")
    assert output == b"\x03"


def test_partial_input_keeps_last_value():
    output, _ = execute(",.,.", b"A")
    assert output == b"AA"


def test_no_data_available_is_not_an_error():
    out = io.BytesIO()
    Interpreter(_NoDataYet(), out, 1).execute("+,.")
    assert out.getvalue() == b"\x01"


def test_increment_and_decrement():
    output, _ = execute("+.+.-.")
    assert output == b"\x01\x02\x01"


def test_cell_value_wraps():
    output, _ = execute("-.+.")
    assert output == b"\xff\x00"


def test_moves_between_cells():
    output, _ = execute("+>++>+++<.<.>>.", memory_size=3)
    assert output == b"\x02\x01\x03"


def test_cursor_wraps_around_tape():
    output, _ = execute("<+++>.<.", memory_size=4)
    assert output == b"\x00\x03"
    output, _ = execute(">>>>+.", memory_size=4)
    assert output == b"\x01"


def test_loop_runs_while_nonzero():
    output, _ = execute(".+[.-].")
    assert output == bytes([0, 1, 0])


def test_loop_skipped_when_cell_is_zero():
    output, _ = execute("[.+]-.")
    assert output == b"\xff"


def test_loop_countdown():
    output, _ = execute("+++[.-]")
    assert output == bytes([3, 2, 1])


def test_nested_loops_multiply():
    # 3 * 4 into cell 1
    output, _ = execute("+++[>++++<-]>.", memory_size=2)
    assert output == bytes([12])


def test_loop_rechecks_cell_after_inner_loop():
    output, _ = execute("++[>+++[>+<-]<-]>>.", memory_size=3)
    assert output == bytes([6])


def test_stray_close_stops_execution():
    output, _ = execute(".+]-.")
    assert output == b"\x00"


def test_unclosed_loop_executes_partial_body():
    output, _ = execute("+++[.-")
    assert output == bytes([3, 2, 1])


def test_hello_world():
    output, _ = execute(HELLO_WORLD, memory_size=30000)
    assert output == b"Hello World!\n"
    assert len(HELLO_WORLD) == 106


def test_tape_is_cleared_between_executions():
    out = io.BytesIO()
    interpreter = Interpreter(io.BytesIO(), out, 2)
    interpreter.execute("+++>+")
    assert interpreter.tape.current_idx == 1
    interpreter.execute(".>.")
    assert out.getvalue() == b"\x00\x00"


def test_run_accepts_parsed_program():
    out = io.BytesIO()
    interpreter = Interpreter(io.BytesIO(b"\x05"), out, 1)
    program = Program.parse(",[.-]")
    interpreter.run(program)
    assert out.getvalue() == bytes([5, 4, 3, 2, 1])


def test_run_accepts_instruction_sequence():
    out = io.BytesIO()
    interpreter = Interpreter(io.BytesIO(), out, 1)
    interpreter.run(list(Program.parse("++.").instructions))
    assert out.getvalue() == b"\x02"


def test_input_shared_across_executions():
    out = io.BytesIO()
    interpreter = Interpreter(io.BytesIO(b"ab"), out, 1)
    interpreter.execute(",.")
    interpreter.execute(",.")
    interpreter.execute(",.")
    assert out.getvalue() == b"ab\x00"


def test_deeply_nested_program_runs():
    depth = sys.getrecursionlimit() * 3
    output, _ = execute("+" + "[" * depth + "-" + "]" * depth + ".")
    assert output == b"\x00"


def test_sink_failure_propagates():
    interpreter = Interpreter(io.BytesIO(), _ClosedSink(), 1)
    with pytest.raises(ValueError):
        interpreter.execute("+.")


def test_sink_failure_stops_before_later_instructions():
    interpreter = Interpreter(io.BytesIO(), _ClosedSink(), 1)
    with pytest.raises(ValueError):
        interpreter.execute(".+")
    assert interpreter.tape.read() == 0


def test_zero_memory_size_is_rejected():
    with pytest.raises(BFIConfigError):
        Interpreter(io.BytesIO(), io.BytesIO(), 0)


def test_debug_logging(caplog):
    caplog.set_level("DEBUG", logger="bfi")
    execute(",[.,]")
    messages = [r.getMessage() for r in caplog.records]
    assert any("input exhausted" in m for m in messages)
    assert any("execution finished" in m for m in messages)

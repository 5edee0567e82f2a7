import logging

from .api import RunOptions, RunResult, read_source, run, run_file, run_string
from .errors import BFIConfigError, BFIError, BFISourceError
from .interpreter import DEFAULT_MEMORY_SIZE, Interpreter
from .lexer import Token, tokenize
from .parser import Loop, Program, parse, parse_tokens
from .tape import Tape

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'Interpreter',
    'Program',
    'Tape',
    'Token',
    'Loop',
    'tokenize',
    'parse',
    'parse_tokens',
    'DEFAULT_MEMORY_SIZE',
    'RunOptions',
    'RunResult',
    'read_source',
    'run',
    'run_file',
    'run_string',
    'BFIError',
    'BFISourceError',
    'BFIConfigError',
]

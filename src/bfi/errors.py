from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


def _hint_for(message: str, *, kind: str) -> Optional[str]:
    msg = message.lower()
    if kind == 'source':
        if 'no such file' in msg:
            return 'Check the path; it is resolved relative to the current directory.'
        if 'is a directory' in msg:
            return 'Pass the program file itself, not the directory containing it.'
        if 'permission denied' in msg:
            return 'Check that the file is readable by the current user.'
        if 'codec' in msg:
            return 'Only the eight command characters matter; try --encoding latin-1.'
        return None
    if kind == 'config':
        if 'memory_size' in msg:
            return 'The tape needs at least one cell. The usual size is 30000.'
        return None
    return None


@dataclass(eq=False)
class BFIError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(eq=False)
class BFISourceError(BFIError):
    path: str
    hint: Optional[str] = None


@dataclass(eq=False)
class BFIConfigError(BFIError):
    field: str
    hint: Optional[str] = None


def make_source_error(*, path: str, exc: BaseException) -> BFISourceError:
    if isinstance(exc, FileNotFoundError):
        message = f"no such file: '{path}'"
    elif isinstance(exc, OSError) and exc.strerror:
        message = f"{exc.strerror}: '{path}'"
    else:
        message = str(exc)
    return BFISourceError(message=message, path=path, hint=_hint_for(message, kind='source'))


def make_config_error(*, field: str, value: object) -> BFIConfigError:
    message = f"invalid {field}: {value!r} (must be a positive integer)"
    return BFIConfigError(message=message, field=field, hint=_hint_for(message, kind='config'))

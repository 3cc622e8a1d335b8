"""
Print, log and assert helpers for scripts.
"""
import sys
import logging
from enum import Enum, IntEnum
from typing import Any, Mapping, TextIO
from pydantic import BaseModel, ConfigDict, Field

from .exceptions import AssertionFailure
from .options import Options


class Level(IntEnum):
    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4
    ANY = 5


LEVELS = tuple(lvl.name for lvl in Level)

_LOGGING_LEVELS = {
    Level.DEBUG: logging.DEBUG,
    Level.INFO: logging.INFO,
    Level.WARN: logging.WARNING,
    Level.ERROR: logging.ERROR,
    Level.FATAL: logging.CRITICAL,
    Level.ANY: logging.CRITICAL,
}

_LEVEL_ALIASES = {"WARNING": Level.WARN, "CRITICAL": Level.FATAL}


class Termination(Enum):
    """
    Termination decides what a failed check does after reporting.

    raise_: raise the configured exception
    exit: end the process with the configured exit code
    """

    raise_ = "raise"
    exit = "exit"


class _ReportOptions(BaseModel):
    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    message: str
    logger: Any = None
    level: int | str
    # resolved per call so redirected stderr is honoured
    stream: Any = Field(default_factory=lambda: sys.stderr)


class RaiseOptions(_ReportOptions):
    error_class: type[BaseException] = AssertionFailure
    message: str = "an unknown error has occurred and an exception has been raised"
    level: int | str = Level.ERROR


class ExitOptions(_ReportOptions):
    exit_code: int = 1
    message: str = "an unknown error has occurred and the program will exit"
    level: int | str = Level.FATAL


_POLICY_OPTIONS: dict[Termination, type[_ReportOptions]] = {
    Termination.raise_: RaiseOptions,
    Termination.exit: ExitOptions,
}


def level_to_str(lvl: Any) -> str:
    """
    Name of a severity level, "ANY" for anything out of range.

    Strings are descriptive levels and are returned untouched.
    """
    if isinstance(lvl, str):
        return lvl
    if isinstance(lvl, int) and 0 <= lvl < len(LEVELS):
        return LEVELS[lvl]
    return LEVELS[-1]


def _to_level(lvl: Any) -> Level:
    if isinstance(lvl, str):
        name = lvl.strip().upper()
        if name in _LEVEL_ALIASES:
            return _LEVEL_ALIASES[name]
        return Level[name] if name in Level.__members__ else Level.ANY
    return Level[level_to_str(lvl)]


def level_to_logging(lvl: Any) -> int:
    """
    The stdlib logging number matching a severity level.
    """
    return _LOGGING_LEVELS[_to_level(lvl)]


def printn(*args: Any, stream: TextIO | None = None) -> None:
    """
    Print the passed objects back to back and finish with a linebreak.

    Saves adding a newline to every diagnostic print:

        >>> printn("foo", 1)
        foo1
    """
    print(*args, sep="", file=stream)


def print_error(msg: Any, stream: TextIO | None = None, level: Any = Level.ERROR) -> None:
    """
    Write a single "LEVEL: msg" line to a stream, stderr by default.

    An empty level name leaves the prefix off entirely.
    """
    if stream is None:
        stream = sys.stderr
    lvl_str = level_to_str(level)
    prefix = f"{lvl_str}: " if lvl_str else ""
    stream.write(f"{prefix}{msg}\n")


def log_error(msg: Any, logger: Any, level: Any = Level.ERROR) -> None:
    """
    Forward a message to anything with a logging-style log(level, msg) method.
    """
    logger.log(level_to_logging(level), msg)


def _build_options(
    cls: type[_ReportOptions], options: Any, overrides: Mapping[str, Any]
) -> _ReportOptions:
    if options is None:
        base = {}
    elif isinstance(options, BaseModel):
        base = dict(options)
    elif isinstance(options, Options):
        base = options.as_dict()
    else:
        base = dict(options)
    base.update(overrides)
    return cls(**base)


def _report(opts: _ReportOptions) -> None:
    if opts.stream is not None:
        print_error(opts.message, stream=opts.stream, level=opts.level)
    if opts.logger is not None:
        log_error(opts.message, opts.logger, level=opts.level)


def check(cond: Any, policy: Termination, options: Any = None, **overrides: Any) -> None:
    """
    Report and then raise or exit unless cond holds.

    Options are only read once the check has failed.
    """
    if cond:
        return
    opts = _build_options(_POLICY_OPTIONS[policy], options, overrides)
    _report(opts)
    if policy is Termination.exit:
        sys.exit(opts.exit_code)  # type: ignore[attr-defined]
    raise opts.error_class(opts.message)  # type: ignore[attr-defined]


def assert_or_raise(cond: Any, options: Any = None, **overrides: Any) -> None:
    """
    Raise an exception unless the passed condition is met.

    Python's assert vanishes under -O and can't pick its error class or
    report anywhere. This keeps working and can also write the message to a
    stream and a logger before raising:

        assert_or_raise(day_of_month <= 31)
        assert_or_raise(path.exists(), error_class=FileNotFoundError)
        assert_or_raise(denominator != 0, message="division by zero!", stream=None)

    Accepted options are the fields of RaiseOptions, passed as a RaiseOptions,
    a mapping, an Options record and/or keyword arguments.
    """
    check(cond, Termination.raise_, options, **overrides)


def assert_or_exit(cond: Any, options: Any = None, **overrides: Any) -> None:
    """
    Exit the program unless the passed condition is met.

    Like assert_or_raise but reports at FATAL and ends with sys.exit, taking
    the fields of ExitOptions.
    """
    check(cond, Termination.exit, options, **overrides)


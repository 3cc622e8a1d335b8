from .options import Options, default_options
from .common import (
    LEVELS,
    ExitOptions,
    Level,
    RaiseOptions,
    Termination,
    assert_or_exit,
    assert_or_raise,
    check,
    level_to_logging,
    level_to_str,
    log_error,
    print_error,
    printn,
)
from .text import fill, wrap

__all__ = [
    "Options",
    "default_options",
    "LEVELS",
    "Level",
    "Termination",
    "RaiseOptions",
    "ExitOptions",
    "check",
    "assert_or_raise",
    "assert_or_exit",
    "level_to_str",
    "level_to_logging",
    "print_error",
    "log_error",
    "printn",
    "fill",
    "wrap",
]

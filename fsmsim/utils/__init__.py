"""Utility modules for fsmsim."""

from fsmsim.utils.logging import (
    configure_logging,
    get_logger,
    set_run_id,
)
from fsmsim.utils.result import (
    ConfigError,
    Err,
    ExitCode,
    InputError,
    Ok,
    Result,
    ResultError,
)

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    "set_run_id",
    # Result
    "Ok",
    "Err",
    "Result",
    "ResultError",
    "ConfigError",
    "InputError",
    "ExitCode",
]

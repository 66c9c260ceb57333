"""
Terminal context logger.

Provides logging interface for the terminal context with automatic [terminal] prefix.
All terminal modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from termcv.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[terminal]"


def setup_terminal_logger(
    log_dir: Path = None, language: str = "en", console_level: str = "INFO"
) -> Path:
    """
    Setup logger for the terminal context.

    Args:
        log_dir: Directory for this session's logs (defaults to LOGS_PATH)
        language: Active CV language, recorded in the provenance header
        console_level: Minimum level echoed to the console

    Returns:
        Path to log file

    Example:
        from termcv.contexts.terminal.logger import setup_terminal_logger, _log_info

        log_file = setup_terminal_logger(console_level="WARNING")
        _log_info("Session started")
    """
    return _setup_logger(
        context_name="terminal",
        log_dir=log_dir,
        extra_provenance={"Language": language},
        console_level=console_level,
    )


# Wrapper functions with automatic [terminal] prefix


def _log_info(message: str) -> None:
    """Log info message with [terminal] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [terminal] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [terminal] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [terminal] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_command_failure(command_name: str, error: Exception) -> None:
    """Log a handler failure with its traceback (file sink only at DEBUG)."""
    _log_error(f"Command '{command_name}' failed: {error}")
    logger.opt(exception=error).debug(f"{CONTEXT_PREFIX} Traceback for '{command_name}'")

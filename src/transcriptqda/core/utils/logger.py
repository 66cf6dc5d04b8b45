# transcriptqda/core/utils/logger.py

"""
Logging configuration and utilities for transcriptqda.

This module provides centralized logging configuration and helper functions
so that every pipeline stage reports progress and failures the same way.

Key Features:
- Global logger instance with lazy initialization
- Standardized ``[MODULE] message`` formatting
- Console output with an optional log file
- Analysis and pipeline lifecycle tracking
- Performance timing
"""

import logging
import sys

# Global logger instance for singleton pattern
_logger: logging.Logger | None = None

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOGGER_NAME = "transcriptqda"


def setup_logging(
    level: str = DEFAULT_LOG_LEVEL,
    log_file: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Set up logging configuration for transcriptqda.

    Calling this again replaces the handlers of the shared logger, so the CLI
    can reconfigure the level after the configuration has been loaded.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file (optional). If provided, logs are written
                 to both console and file.
        format_string: Custom log format string (optional)

    Returns:
        Configured logger instance
    """
    global _logger

    logger = logging.getLogger(LOGGER_NAME)
    logger.disabled = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)
    logger.propagate = False

    formatter = logging.Formatter(format_string or DEFAULT_LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """
    Get the global logger instance, creating it with defaults if needed.

    Returns:
        The global logger instance
    """
    if _logger is None:
        return setup_logging()
    return _logger


def _format(module: str, message: str, context: str = "") -> str:
    formatted = f"[{module.upper()}] {message}"
    if context:
        formatted += f" | Context: {context}"
    return formatted


def log_error(
    module: str, error: str, context: str = "", exception: Exception | None = None
) -> None:
    """
    Log a standardized error message.

    Args:
        module: Name of the module where the error occurred
        error: Error message describing what went wrong
        context: Additional context information (optional)
        exception: Exception object to include a stack trace (optional)
    """
    logger = get_logger()
    logger.error(_format(module, error, context), exc_info=exception is not None)


def log_warning(module: str, warning: str, context: str = "") -> None:
    """Log a standardized warning message."""
    get_logger().warning(_format(module, warning, context))


def log_info(module: str, message: str, context: str = "") -> None:
    """Log a standardized info message."""
    get_logger().info(_format(module, message, context))


def log_debug(module: str, message: str, context: str = "") -> None:
    """Log a standardized debug message."""
    get_logger().debug(_format(module, message, context))


def log_analysis_start(module_name: str, source: str) -> None:
    """
    Log the start of an analysis module.

    Args:
        module_name: Name of the analysis module
        source: Transcript directory being analyzed
    """
    get_logger().info(f"Starting {module_name} analysis for: {source}")


def log_analysis_complete(
    module_name: str, source: str, duration: float | None = None
) -> None:
    """
    Log the completion of an analysis module.

    Args:
        module_name: Name of the analysis module
        source: Transcript directory that was analyzed
        duration: Duration of the analysis in seconds (optional)
    """
    message = f"Completed {module_name} analysis for: {source}"
    if duration is not None:
        message += f" (took {duration:.2f}s)"
    get_logger().info(message)


def log_analysis_error(module_name: str, source: str, error: Exception) -> None:
    """Log an error that occurred during analysis, with its traceback."""
    get_logger().error(
        f"Error in {module_name} analysis for {source}: {error}",
        exc_info=True,
    )


def log_pipeline_start(source: str, modules: list[str]) -> None:
    """
    Log the start of a pipeline execution.

    Args:
        source: Transcript directory being processed
        modules: Modules that will be executed
    """
    get_logger().info(
        f"Starting analysis pipeline for {source} with modules: {', '.join(modules)}"
    )


def log_pipeline_complete(source: str, modules_run: list[str]) -> None:
    """Log the completion of a pipeline execution."""
    message = f"Pipeline completed for {source}"
    if modules_run:
        message += f" - Successfully ran: {', '.join(modules_run)}"
    get_logger().info(message)


def log_file_operation(
    operation: str, file_path: str, success: bool, error: str | None = None
) -> None:
    """
    Log a file operation.

    Args:
        operation: Type of operation (read, write, skip, ...)
        file_path: Path to the file being operated on
        success: Whether the operation was successful
        error: Error message if the operation failed (optional)
    """
    logger = get_logger()
    if success:
        logger.debug(f"File {operation}: {file_path}")
    else:
        logger.warning(f"File {operation} failed: {file_path} - {error}")


def log_performance(operation: str, duration: float, context: str = "") -> None:
    """Log how long an operation took."""
    message = f"Performance: {operation} took {duration:.2f}s"
    if context:
        message += f" ({context})"
    get_logger().info(message)


def reset_logging() -> None:
    """Drop the configured handlers so the next get_logger() starts fresh."""
    global _logger
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    _logger = None

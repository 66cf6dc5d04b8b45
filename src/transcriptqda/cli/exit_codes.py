"""
Exit codes for the transcriptqda CLI.

Scripts can rely on these codes:

    0    analysis finished
    1    analysis failed (unreadable input, nothing to analyze, model fit error)
    2    the configuration could not be loaded or is invalid
    130  interrupted by the user
"""

from typing import Optional

import typer

from transcriptqda.core.utils.notifications import console

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_USER_CANCEL = 130  # Standard for SIGINT (Ctrl+C)


class CliExit(typer.Exit):
    """
    ``typer.Exit`` carrying one of the standard exit codes and an optional message.

    Usage:
        raise CliExit.error("Transcript directory not found")
        raise CliExit.config_error("Invalid config file")
    """

    def __init__(self, code: int, message: Optional[str] = None):
        self.message = message
        super().__init__(code)
        if message:
            style = None if code == EXIT_SUCCESS else "red"
            console.print(message, style=style)

    @classmethod
    def error(cls, message: Optional[str] = None) -> "CliExit":
        return cls(EXIT_ERROR, message)

    @classmethod
    def config_error(cls, message: Optional[str] = None) -> "CliExit":
        return cls(EXIT_CONFIG_ERROR, message)

    @classmethod
    def user_cancel(cls, message: Optional[str] = None) -> "CliExit":
        return cls(EXIT_USER_CANCEL, message or "Operation cancelled by user")

"""
This module defines custom exceptions for the logging_delegate library.
"""

from logging_delegate._typing import *


class LoggingDelegateError(Exception):
    """
    Base exception class for all errors raised by the logging_delegate library.
    """


class InvalidTarget(LoggingDelegateError, TypeError):
    """
    Raised when a category is requested for something that is neither a class nor a qualified class name.
    """

    def __init__(self, target: Any):
        """
        Initializes the InvalidTarget exception.

        Args:
            target: The object a category was requested for.
        """
        err = f"A category can only be derived from a class or a qualified class name. You passed {target!r}"
        err += f" of type {type(target).__name__}."
        super().__init__(err)
        self.target = target


class InvalidStyle(LoggingDelegateError, ValueError):
    """
    Raised when an unknown placeholder style is configured.
    """

    viable_styles = ("{", "%")

    def __init__(self, style: Any):
        super().__init__(f"'style' must be one of: {self.viable_styles}. You passed {style!r}.")


class LoggerNotCreated(LoggingDelegateError, RuntimeError):
    """
    Raised when a :class:`~logging_delegate._typing.LoggerFactory` returns no logger for a category.
    """

    def __init__(self, factory: Any, category: str):
        """
        Initializes the LoggerNotCreated exception.

        Args:
            factory: The factory that was asked for the logger.
            category: The category the logger was requested for.
        """
        err = f"{factory!r} did not return a logger for category '{category}'."
        err += "\nThis is likely an issue with a custom LoggerFactory implementation."
        super().__init__(err)
        self.factory = factory
        self.category = category


__all__ = [
    "LoggingDelegateError",
    "InvalidTarget",
    "InvalidStyle",
    "LoggerNotCreated",
]

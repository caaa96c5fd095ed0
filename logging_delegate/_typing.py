"""
This module provides type definitions and type-related utilities for the `logging_delegate` library.

It includes the protocols a logging backend has to satisfy so that delegates can be wired to any backend,
not only the standard library :mod:`logging` module.

Examples:
    Any object with a ``get_logger`` method satisfies :class:`LoggerFactory`:

    ```python
    import logging

    from logging_delegate._typing import LoggerFactory

    class PrefixedFactory:
        def get_logger(self, category: str) -> logging.Logger:
            return logging.getLogger(f"myapp.{category}")

    factory: LoggerFactory = PrefixedFactory()
    ```

See Also:
    - :mod:`typing`
    - :mod:`logging`
"""

from typing import (
    Any,
    Literal,
    Optional,
    Protocol,
    Tuple,
    Type,
    Union,
    runtime_checkable,
)

from typing_extensions import Self

Category = str
"""A dot-separated logger namespace such as ``"myapp.services.Billing"``."""

CategoryTarget = Union[Type[Any], str, None]
"""Anything a category can be derived from: a class, an already qualified class name, or nothing at all."""

Style = Literal["{", "%"]
"""The placeholder style used when emitting records through a delegate."""


@runtime_checkable
class LoggerHandle(Protocol):
    """
    Protocol for the logger objects a :class:`LoggerFactory` hands out.

    :class:`logging.Logger` and :class:`logging.LoggerAdapter` both satisfy it.
    """

    def isEnabledFor(self, level: int) -> bool: ...
    def debug(self, msg: Any, *args: Any, **kwargs: Any) -> None: ...
    def info(self, msg: Any, *args: Any, **kwargs: Any) -> None: ...
    def warning(self, msg: Any, *args: Any, **kwargs: Any) -> None: ...
    def error(self, msg: Any, *args: Any, **kwargs: Any) -> None: ...
    def exception(self, msg: Any, *args: Any, **kwargs: Any) -> None: ...


@runtime_checkable
class LoggerFactory(Protocol):
    """
    Protocol for logging backends.

    A factory turns a category into a :class:`LoggerHandle`. It is expected to return the same
    handle for the same category, the way :func:`logging.getLogger` does.
    """

    def get_logger(self, category: Category) -> LoggerHandle: ...

"""
This module provides the standard library backend for logging delegates.

:class:`StdlibLoggerFactory` satisfies :class:`~logging_delegate._typing.LoggerFactory` by handing out
:class:`logging.Logger` instances, which :func:`logging.getLogger` already keeps unique per name.
"""

import functools
import logging

from logging_delegate import ENVIRONMENT_VARIABLES as ENVS
from logging_delegate._typing import *


class StdlibLoggerFactory:
    """
    A :class:`~logging_delegate._typing.LoggerFactory` backed by :func:`logging.getLogger`.

    When `root` is set, every logger is created as a child of the logger named `root`, so the whole
    library's delegates can be configured through a single logger.

    Examples:
        >>> factory = StdlibLoggerFactory(root="myapp")
        >>> factory.get_logger("billing.Invoice").name
        'myapp.billing.Invoice'
    """

    __slots__ = ("root",)

    def __init__(self, root: Optional[str] = None) -> None:
        self.root = root or None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(root={self.root!r})"

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and other.root == self.root  # type: ignore [attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.root))

    def get_logger(self, category: Category) -> logging.Logger:
        if self.root is None:
            return logging.getLogger(category)
        return logging.getLogger(self.root).getChild(category)


@functools.lru_cache(maxsize=1)
def get_default_factory() -> StdlibLoggerFactory:
    """Returns the process-wide factory, nested under :data:`~logging_delegate.ENVIRONMENT_VARIABLES.ROOT` if it is set."""
    return StdlibLoggerFactory(root=str(ENVS.ROOT))


__all__ = ["StdlibLoggerFactory", "get_default_factory"]

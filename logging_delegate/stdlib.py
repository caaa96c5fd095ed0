"""
This module provides the :mod:`logging` flavoured logging delegate.
"""

from logging import DEBUG, ERROR, INFO, WARNING, Logger

from logging_delegate._typing import *
from logging_delegate.delegate import LoggingDelegate
from logging_delegate.exceptions import LoggerNotCreated
from logging_delegate.messages import prepare

_LEVEL_METHODS = {DEBUG: "debug", INFO: "info", WARNING: "warning", ERROR: "error"}


class StdlibLoggingDelegate(LoggingDelegate):
    """
    A :class:`~logging_delegate.delegate.LoggingDelegate` that logs through a :class:`logging.Logger`.

    Subclass it and add one method per log statement. The emission helpers accept positional
    placeholders in the configured style and only stringify their arguments if the record is emitted.

    Examples:
        >>> class Service:
        ...     class LoggingDelegate(StdlibLoggingDelegate):
        ...         def started(self, job):
        ...             self.info("started [{}]", job)
        >>> Service.LoggingDelegate().started("nightly")
    """

    __slots__ = ("_logger",)

    @property
    def logger(self) -> Logger:
        """
        The real logger of the delegate.

        Log statements belong in the delegate's own methods, but this is convenient for callers that need
        the logger itself, for instance to pass it on.
        """
        return self._logger

    def is_debug_enabled(self) -> bool:
        return self._logger.isEnabledFor(DEBUG)

    def is_info_enabled(self) -> bool:
        return self._logger.isEnabledFor(INFO)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self._logger.isEnabledFor(DEBUG):
            self._log(DEBUG, msg, args, **kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self._logger.isEnabledFor(INFO):
            self._log(INFO, msg, args, **kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self._logger.isEnabledFor(WARNING):
            self._log(WARNING, msg, args, **kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self._logger.isEnabledFor(ERROR):
            self._log(ERROR, msg, args, **kwargs)

    def exception(self, msg: str, *args: Any, exc_info: Any = True, **kwargs: Any) -> None:
        """Logs at ERROR level with the active exception attached. Call it from an exception handler."""
        kwargs.setdefault("stacklevel", 4)
        self.error(msg, *args, exc_info=exc_info, **kwargs)

    def _create_logger(self, category: Category) -> None:
        factory = self._config.get_factory()
        logger = factory.get_logger(category)
        if logger is None:
            raise LoggerNotCreated(factory, category)
        self._logger = logger

    def _log(self, level: int, msg: str, args: Tuple[Any, ...], **kwargs: Any) -> None:
        msg, args = prepare(self._config.style, msg, args)
        # report the caller of the public helper, not this module
        kwargs.setdefault("stacklevel", 3)
        # dispatch by name, a LoggerHandle is not required to have `log`
        getattr(self._logger, _LEVEL_METHODS[level])(msg, *args, **kwargs)


__all__ = ["StdlibLoggingDelegate"]

"""
This module initializes the logging_delegate library, which makes it easy to apply the logging delegate pattern.

A logging delegate is a small object bundling all logging statements of the object that owns it, so
business logic is not cluttered with log level checks and message formatting.

Modules and components included:
    - :class:`~LoggingDelegate`: Abstract base class resolving a category and creating a logger on construction.
    - :class:`~StdlibLoggingDelegate`: The :mod:`logging` backed delegate to subclass.
    - :class:`~CategoryResolver`, :func:`~resolve_category`: Category derivation from classes.
    - :class:`~DelegateConfig`, :func:`~default_config`: Prefix, postfix, backend and placeholder style.
    - :class:`~StdlibLoggerFactory`: The default backend.

Examples:
    Declaring a delegate inside the class it serves:
    >>> from logging_delegate import StdlibLoggingDelegate
    >>> class BusinessService:
    ...     def __init__(self):
    ...         self._log = BusinessService.LoggingDelegate()
    ...     def do_something(self, value):
    ...         self._log.do_something_start(value)
    ...     class LoggingDelegate(StdlibLoggingDelegate):
    ...         def do_something_start(self, value):
    ...             self.debug("doSomething START with [{}]", value)
    >>> BusinessService()._log.category
    '__main__.BusinessService'

    Sharing one delegate at module level:
    >>> _log = BusinessService.LoggingDelegate(BusinessService, config=DelegateConfig(prefix="audit"))
    >>> _log.category
    'audit.__main__.BusinessService'

See Also:
    - :mod:`logging_delegate.category`: Category derivation.
    - :mod:`logging_delegate.ENVIRONMENT_VARIABLES`: Process-wide defaults.
"""

from logging_delegate import exceptions
from logging_delegate.category import CategoryResolver, fully_qualified_name, resolve_category
from logging_delegate.config import DelegateConfig, default_config
from logging_delegate.delegate import LoggingDelegate
from logging_delegate.factory import StdlibLoggerFactory, get_default_factory
from logging_delegate.stdlib import StdlibLoggingDelegate


__all__ = [
    # classes
    "LoggingDelegate",
    "StdlibLoggingDelegate",
    "CategoryResolver",
    "DelegateConfig",
    "StdlibLoggerFactory",
    # functions
    "resolve_category",
    "fully_qualified_name",
    "default_config",
    "get_default_factory",
    # modules
    "exceptions",
]

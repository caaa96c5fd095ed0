"""
This module derives logger categories from classes.

A category is the fully qualified name of a class, optionally decorated with a prefix and a postfix.
Derivation never produces an empty category: when there is nothing to derive from, the resolver
falls back to a category named after a known class, by default the resolver's own.

Examples:
    >>> class Widget: ...
    >>> resolve_category(Widget)
    '__main__.Widget'
    >>> resolve_category(Widget, prefix="audit")
    'audit.__main__.Widget'
    >>> resolve_category(Widget, postfix=".slow")
    '__main__.Widget.slow'
"""

import logging

from logging_delegate._typing import *
from logging_delegate.exceptions import InvalidTarget

logger = logging.getLogger(__name__)

_LOCALS = "<locals>"


def fully_qualified_name(cls: Type[Any]) -> str:
    """Returns `module.QualName` for `cls`, without any `<locals>` markers."""
    qualname = ".".join(part for part in cls.__qualname__.split(".") if part != _LOCALS)
    return f"{cls.__module__}.{qualname}"


def enclosing_class_name(cls: Type[Any]) -> Optional[str]:
    """
    Returns the fully qualified name of the class `cls` was declared in, if any.

    The enclosing class is read from ``__qualname__``. A class declared in the body of ``Owner``
    and a class declared inside one of ``Owner``'s methods both resolve to ``Owner``. A class
    declared at module level or inside a plain function has no enclosing class.

    Args:
        cls: The class to inspect, usually the concrete type of a delegate.

    Returns:
        The qualified name of the enclosing class, or None.

    Examples:
        >>> class Service:
        ...     class LoggingDelegate: ...
        >>> enclosing_class_name(Service.LoggingDelegate)
        '__main__.Service'
    """
    parts = cls.__qualname__.split(".")[:-1]
    # a function scope shows up as "<name>.<locals>", skip both to reach the class around it
    while parts and parts[-1] == _LOCALS:
        parts = parts[:-2]
    if not parts:
        return None
    return f"{cls.__module__}.{'.'.join(p for p in parts if p != _LOCALS)}"


class CategoryResolver:
    """
    Computes categories for classes, decorated with an optional prefix and postfix.

    Empty strings are treated exactly like absent values, for the prefix, the postfix,
    and the computed category alike.
    """

    def __init__(self, fallback: Optional[Type[Any]] = None) -> None:
        """
        Args:
            fallback: The class the category falls back to when nothing else is available.
                Defaults to the resolver's own class.
        """
        self.fallback = fallback if fallback is not None else type(self)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} fallback={self.fallback.__qualname__}>"

    def resolve(
        self,
        target: CategoryTarget,
        prefix: Optional[str] = None,
        postfix: Optional[str] = None,
    ) -> Category:
        """
        Resolves the category for `target`.

        Args:
            target: A class, an already qualified class name, or None.
            prefix: Prepended to the category. A "." separator is added unless it already ends with one.
            postfix: Appended to the category verbatim.

        Raises:
            InvalidTarget: If `target` is not a class, a string or None.

        Examples:
            >>> CategoryResolver().resolve("com.acme.Widget", prefix="audit.")
            'audit.com.acme.Widget'
        """
        category = self.decorate(self.name_of(target), prefix, postfix)
        if not category:
            category = self.resolve_fallback(prefix, postfix)
            logger.debug("nothing to derive a category from, falling back to %s", category)
        return category

    def resolve_fallback(self, prefix: Optional[str] = None, postfix: Optional[str] = None) -> Category:
        """Returns the decorated category of the fallback class."""
        return self.decorate(fully_qualified_name(self.fallback), prefix, postfix)

    @staticmethod
    def decorate(name: Optional[str], prefix: Optional[str] = None, postfix: Optional[str] = None) -> str:
        """Wraps `name` in `prefix` and `postfix`. Returns an empty string when there is no name."""
        if not name:
            return ""
        category = name
        if prefix:
            category = (prefix if prefix.endswith(".") else f"{prefix}.") + category
        if postfix:
            category += postfix
        return category

    @staticmethod
    def name_of(target: CategoryTarget) -> Optional[str]:
        if target is None:
            return None
        if isinstance(target, str):
            return target
        if isinstance(target, type):
            return fully_qualified_name(target)
        raise InvalidTarget(target)


default_resolver = CategoryResolver()


def resolve_category(
    target: CategoryTarget,
    prefix: Optional[str] = None,
    postfix: Optional[str] = None,
) -> Category:
    """Resolves the category for `target` with the :data:`default_resolver`."""
    return default_resolver.resolve(target, prefix, postfix)


__all__ = [
    "CategoryResolver",
    "default_resolver",
    "enclosing_class_name",
    "fully_qualified_name",
    "resolve_category",
]

"""
This module provides the abstract base class for logging delegates.

A logging delegate is a small object that holds all of the logging statements of the object that owns it,
so the owner's methods read at a single level of abstraction:

.. code-block:: python

    class BillingService:
        def __init__(self):
            self._log = BillingService.LoggingDelegate()

        def charge(self, account, amount):
            self._log.charge_start(account, amount)
            receipt = self._gateway.charge(account, amount)
            self._log.charge_finish(account, receipt)
            return receipt

        # it is common to put the delegate at the bottom of the class
        class LoggingDelegate(StdlibLoggingDelegate):
            def charge_start(self, account, amount):
                self.debug("charge START for [{}] amount [{}]", account, amount)

            def charge_finish(self, account, receipt):
                self.info("charge FINISH for [{}], receipt: [{}]", account, receipt)

Declared inside ``BillingService``, the delegate logs under ``BillingService``'s category. For a delegate
declared elsewhere, or shared at module level, pass the owner explicitly:

.. code-block:: python

    _log = BillingLoggingDelegate(BillingService)

Subclasses implement :meth:`LoggingDelegate._create_logger` for a specific backend, see
:class:`~logging_delegate.stdlib.StdlibLoggingDelegate`.
"""

import abc
import logging

from logging_delegate._typing import *
from logging_delegate.category import CategoryResolver, enclosing_class_name
from logging_delegate.config import DelegateConfig, default_config
from logging_delegate.messages import check_style

logger = logging.getLogger(__name__)

_MISSING = object()


class LoggingDelegate(metaclass=abc.ABCMeta):
    """
    Abstract base class for applying the logging delegate pattern.

    On construction the delegate resolves its category and creates its logger exactly once. The category is
    derived from `owner` when one is passed, otherwise from the class the concrete delegate type is declared in.
    When neither yields a name, the delegate's own class is used.

    The category can be namespaced through the config, or by overriding :meth:`get_prefix` and
    :meth:`get_postfix`.
    """

    __slots__ = "_config", "_category"

    def __init__(self, owner: CategoryTarget = _MISSING, *, config: Optional[DelegateConfig] = None) -> None:  # type: ignore [assignment]
        """
        Args:
            owner: The class (or qualified class name) to name the category after. Omit it when the delegate
                is declared inside the class it serves.
            config: Prefix, postfix, backend and placeholder style. Defaults to :func:`~logging_delegate.config.default_config`.

        Raises:
            InvalidTarget: If `owner` is not a class, a string or None.
            InvalidStyle: If the config names an unknown placeholder style.
        """
        self._config = config if config is not None else default_config()
        check_style(self._config.style)
        if owner is _MISSING:
            category = self._build_category()
        else:
            category = self._build_category_for(owner)
        self._category = category
        logger.debug("creating logger for %s with category %s", type(self).__qualname__, category)
        self._create_logger(category)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} category='{self._category}'>"

    @property
    def category(self) -> Category:
        """The category this delegate's logger was created for."""
        return self._category

    @property
    def config(self) -> DelegateConfig:
        return self._config

    ####################
    # Abstract Methods #
    ####################

    @abc.abstractmethod
    def _create_logger(self, category: Category) -> None:
        """
        Creates the actual logger for `category` and stores it on the delegate.

        Called exactly once, from :meth:`__init__`.
        """

    @abc.abstractmethod
    def is_debug_enabled(self) -> bool:
        """Returns True if the logger currently handles DEBUG records."""

    @abc.abstractmethod
    def is_info_enabled(self) -> bool:
        """Returns True if the logger currently handles INFO records."""

    ##################################
    # Concrete Methods (overridable) #
    ##################################

    def get_prefix(self) -> Optional[str]:
        """Returns the prefix for the category. Defaults to the config's prefix."""
        return self._config.prefix

    def get_postfix(self) -> Optional[str]:
        """Returns the postfix for the category. Defaults to the config's postfix."""
        return self._config.postfix

    def _build_category(self) -> Category:
        """
        Returns the category when no owner was passed.

        The default implementation expects the concrete delegate type to be declared inside the class it serves,
        and names the category after that class.
        """
        return self._build_category_for(enclosing_class_name(type(self)))

    def _build_category_for(self, target: CategoryTarget) -> Category:
        """Returns the decorated category for `target`, or :meth:`_build_fallback_category` when there is none."""
        category = CategoryResolver.decorate(CategoryResolver.name_of(target), self.get_prefix(), self.get_postfix())
        if not category:
            category = self._build_fallback_category()
            logger.debug("%s has nothing to derive a category from, falling back to %s", type(self).__qualname__, category)
        return category

    def _build_fallback_category(self) -> Category:
        """
        Returns the category used when neither the owner nor the enclosing class yield one.

        The default implementation names the category after this delegate's own class, decorated like any other.
        """
        resolver = CategoryResolver(fallback=type(self))
        return resolver.resolve_fallback(self.get_prefix(), self.get_postfix())


__all__ = ["LoggingDelegate"]

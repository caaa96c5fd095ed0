import functools
from typing import NamedTuple

from logging_delegate import ENVIRONMENT_VARIABLES as ENVS
from logging_delegate._typing import *
from logging_delegate.factory import get_default_factory
from logging_delegate.messages import check_style


class DelegateConfig(NamedTuple):
    """
    Everything a delegate needs besides its owner: how to decorate the category, which backend to ask
    for a logger, and which placeholder style its emission helpers use.

    Examples:
        >>> config = DelegateConfig(prefix="audit", factory=StdlibLoggerFactory(root="myapp"))
        >>> config.with_options(style="%").style
        '%'
    """

    prefix: Optional[str] = None
    postfix: Optional[str] = None
    factory: Optional[LoggerFactory] = None
    """The backend. None means :func:`~logging_delegate.factory.get_default_factory`."""
    style: Style = "{"

    def with_options(self, **overrides: Any) -> Self:
        """Returns a copy of this config with `overrides` applied."""
        return self._replace(**overrides)

    def get_factory(self) -> LoggerFactory:
        return self.factory if self.factory is not None else get_default_factory()


@functools.lru_cache(maxsize=1)
def default_config() -> DelegateConfig:
    """Returns the config built from the `LOGGING_DELEGATE_*` environment variables."""
    return DelegateConfig(
        prefix=str(ENVS.PREFIX) or None,
        postfix=str(ENVS.POSTFIX) or None,
        factory=get_default_factory(),
        style=check_style(str(ENVS.STYLE)),
    )


__all__ = ["DelegateConfig", "default_config"]

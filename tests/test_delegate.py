import logging

import pytest

from logging_delegate.config import DelegateConfig
from logging_delegate.delegate import LoggingDelegate
from logging_delegate.exceptions import InvalidStyle, InvalidTarget


class RecordingDelegate(LoggingDelegate):
    """A delegate that records the categories it was asked to create a logger for."""

    def _create_logger(self, category):
        self.created = getattr(self, "created", []) + [category]

    def is_debug_enabled(self):
        return True

    def is_info_enabled(self):
        return False


class Owner:
    def __init__(self):
        self.log = Owner.LoggingDelegate()

    class LoggingDelegate(RecordingDelegate): ...


class AuditDelegate(RecordingDelegate):
    def get_prefix(self):
        return "audit"

    def get_postfix(self):
        return ".slow"


class Explicit: ...


def test_cannot_instantiate_abstract():
    with pytest.raises(TypeError):
        LoggingDelegate()


def test_missing_hook_is_abstract():
    class Incomplete(LoggingDelegate):
        def _create_logger(self, category): ...

    with pytest.raises(TypeError):
        Incomplete()


def test_default_path_uses_enclosing_class():
    delegate = Owner().log
    assert delegate.category == f"{__name__}.Owner"
    assert delegate.created == [f"{__name__}.Owner"]


def test_default_path_inside_method():
    class Service:
        def make(self):
            class LoggingDelegate(RecordingDelegate): ...

            return LoggingDelegate()

    expected = f"{__name__}.test_default_path_inside_method.Service"
    assert Service().make().category == expected


def test_default_path_without_enclosing_class_falls_back_to_own_class():
    assert RecordingDelegate().category == f"{__name__}.RecordingDelegate"


def test_default_path_local_delegate_falls_back_to_own_class():
    class LocalDelegate(RecordingDelegate): ...

    expected = f"{__name__}.test_default_path_local_delegate_falls_back_to_own_class.LocalDelegate"
    assert LocalDelegate().category == expected


def test_explicit_path():
    delegate = RecordingDelegate(Explicit)
    assert delegate.category == f"{__name__}.Explicit"
    assert delegate.created == [f"{__name__}.Explicit"]


def test_explicit_path_overrides_enclosing_class():
    assert Owner.LoggingDelegate(Explicit).category == f"{__name__}.Explicit"


def test_explicit_path_qualified_name():
    assert RecordingDelegate("com.acme.Widget").category == "com.acme.Widget"


def test_explicit_none_falls_back_to_own_class():
    assert RecordingDelegate(None).category == f"{__name__}.RecordingDelegate"


def test_explicit_invalid_owner():
    with pytest.raises(InvalidTarget):
        RecordingDelegate(42)


def test_create_logger_called_once():
    assert len(Owner().log.created) == 1


def test_config_prefix_postfix():
    config = DelegateConfig(prefix="audit", postfix=".slow")
    assert RecordingDelegate(Explicit, config=config).category == f"audit.{__name__}.Explicit.slow"
    assert Owner.LoggingDelegate(config=config).category == f"audit.{__name__}.Owner.slow"


def test_config_prefix_with_dot():
    config = DelegateConfig(prefix="audit.")
    assert RecordingDelegate("com.acme.Widget", config=config).category == "audit.com.acme.Widget"


def test_overridden_hooks():
    assert AuditDelegate(Explicit).category == f"audit.{__name__}.Explicit.slow"


def test_overridden_hooks_apply_to_fallback():
    assert AuditDelegate().category == f"audit.{__name__}.AuditDelegate.slow"


def test_invalid_style():
    with pytest.raises(InvalidStyle):
        RecordingDelegate(Explicit, config=DelegateConfig(style="$"))


def test_config_property():
    config = DelegateConfig(prefix="audit")
    assert RecordingDelegate(config=config).config is config


def test_repr():
    assert repr(RecordingDelegate("com.acme.Widget")) == "<RecordingDelegate category='com.acme.Widget'>"


def test_construction_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="logging_delegate.delegate")
    RecordingDelegate(Explicit)
    messages = [r.getMessage() for r in caplog.records if r.name == "logging_delegate.delegate"]
    assert messages == [f"creating logger for RecordingDelegate with category {__name__}.Explicit"]


def test_backend_failure_propagates():
    class Broken(RecordingDelegate):
        def _create_logger(self, category):
            raise RuntimeError("backend unavailable")

    with pytest.raises(RuntimeError, match="backend unavailable"):
        Broken(Explicit)


class SharedFallbackDelegate(RecordingDelegate):
    def _build_fallback_category(self):
        return "myapp.unowned"


def test_overridden_fallback():
    assert SharedFallbackDelegate().category == "myapp.unowned"
    assert SharedFallbackDelegate(None).category == "myapp.unowned"
    assert SharedFallbackDelegate("").category == "myapp.unowned"


def test_overridden_fallback_unused_with_owner():
    assert SharedFallbackDelegate(Explicit).category == f"{__name__}.Explicit"


def test_fallback_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="logging_delegate.delegate")
    RecordingDelegate()
    messages = [r.getMessage() for r in caplog.records if r.name == "logging_delegate.delegate"]
    assert messages[0] == f"RecordingDelegate has nothing to derive a category from, falling back to {__name__}.RecordingDelegate"

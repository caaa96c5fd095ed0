import logging

import pytest

from logging_delegate.exceptions import InvalidStyle
from logging_delegate.messages import BraceMessage, check_style, prepare, substitute


class Exploding:
    def __str__(self):
        raise AssertionError("stringified")


def test_substitute():
    assert substitute("doSomething START with [{}]", ("the input",)) == "doSomething START with [the input]"
    assert substitute("[{}], result: [{}]", ("in", "out")) == "[in], result: [out]"


def test_substitute_no_args():
    assert substitute("nothing {} here", ()) == "nothing {} here"


def test_substitute_missing_args():
    assert substitute("{} and {}", (1,)) == "1 and {}"


def test_substitute_surplus_args():
    assert substitute("only {}", (1, 2, 3)) == "only 1"


def test_substitute_other_braces_are_literal():
    assert substitute("{name} is {}", ("x",)) == "{name} is x"
    assert substitute("{{}} {}", ("x",)) == "{x} {}"


def test_brace_message_is_lazy():
    message = BraceMessage("value [{}]", (Exploding(),))
    with pytest.raises(AssertionError):
        str(message)


def test_brace_message_str():
    assert str(BraceMessage("{}-{}", (1, 2))) == "1-2"


def test_brace_message_through_logging(caplog):
    logger = logging.getLogger("test_messages.brace")
    caplog.set_level(logging.INFO, logger=logger.name)
    logger.info(BraceMessage("hello [{}]", ("world",)))
    assert [r.getMessage() for r in caplog.records] == ["hello [world]"]


def test_prepare_percent_passthrough():
    args = (1, 2)
    assert prepare("%", "%s %s", args) == ("%s %s", args)


def test_prepare_brace_wraps():
    msg, args = prepare("{", "{} {}", (1, 2))
    assert isinstance(msg, BraceMessage)
    assert args == ()
    assert str(msg) == "1 2"


def test_prepare_brace_without_args():
    assert prepare("{", "plain", ()) == ("plain", ())


@pytest.mark.parametrize("style", ["{", "%"])
def test_check_style(style):
    assert check_style(style) == style


@pytest.mark.parametrize("style", ["$", "", None, "{}"])
def test_check_style_invalid(style):
    with pytest.raises(InvalidStyle):
        check_style(style)
    with pytest.raises(ValueError):
        check_style(style)


def test_substitute_non_string_format():
    assert substitute(ValueError("boom [{}]"), (1,)) == "boom [1]"
    assert substitute(ValueError("boom"), ()) == "boom"

"""
Lazy placeholder substitution for log messages.

The standard library :mod:`logging` module only interpolates ``%`` placeholders, and only once a record
is actually handled. :class:`BraceMessage` gives ``{}`` placeholders the same lazy behaviour: the message
object is handed to the logger as-is and is only turned into a string when a handler formats the record.
"""

from logging_delegate._typing import *
from logging_delegate.exceptions import InvalidStyle

_PLACEHOLDER = "{}"


def substitute(fmt: Any, args: Tuple[Any, ...]) -> str:
    """
    Replaces each ``{}`` in `fmt` with the next positional argument.

    Placeholders without a matching argument are left in place and surplus arguments are ignored.
    Unlike :meth:`str.format`, nothing else in `fmt` is special, so braces used for other purposes
    never raise. A `fmt` that is not a string is converted with :func:`str` first, as :mod:`logging` does.

    Examples:
        >>> substitute("doSomething START with [{}]", ("the input",))
        'doSomething START with [the input]'
        >>> substitute("{} and {}", (1,))
        '1 and {}'
    """
    if not args:
        return str(fmt)
    pieces = str(fmt).split(_PLACEHOLDER)
    out = [pieces[0]]
    for i, piece in enumerate(pieces[1:]):
        out.append(str(args[i]) if i < len(args) else _PLACEHOLDER)
        out.append(piece)
    return "".join(out)


class BraceMessage:
    """A log message with ``{}`` placeholders, rendered on first use of :func:`str`."""

    __slots__ = "fmt", "args"

    def __init__(self, fmt: Any, args: Tuple[Any, ...]) -> None:
        self.fmt = fmt
        self.args = args

    def __str__(self) -> str:
        return substitute(self.fmt, self.args)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.fmt!r} args={self.args!r}>"


def check_style(style: Any) -> Style:
    """Returns `style` if it is a supported placeholder style, otherwise raises :class:`InvalidStyle`."""
    if style not in InvalidStyle.viable_styles:
        raise InvalidStyle(style)
    return style


def prepare(style: Style, msg: Any, args: Tuple[Any, ...]) -> Tuple[Any, Tuple[Any, ...]]:
    """
    Returns the `(msg, args)` pair to pass to a :class:`logging.Logger` method.

    In ``%`` style the pair is passed through untouched. In ``{`` style, a message with arguments is
    wrapped in a :class:`BraceMessage` so the arguments are only stringified if the record is emitted.
    """
    if style == "%" or not args:
        return msg, args
    return BraceMessage(msg, args), ()


__all__ = ["BraceMessage", "check_style", "prepare", "substitute"]

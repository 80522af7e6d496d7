"""
Rounding context: the current default rounding mode.

The default is kept in a ``ContextVar`` so each thread and each asyncio
task sees its own value; overriding it in one task never leaks into
another one.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import Iterator, Optional

from .rounding import Rounding

_dflt_rounding: ContextVar[Rounding] = \
    ContextVar("dflt_rounding", default=Rounding.ROUND_HALF_EVEN)


def get_dflt_rounding_mode() -> Rounding:
    """Return default rounding mode."""
    return _dflt_rounding.get()


def set_dflt_rounding_mode(rounding: Rounding) -> Token:
    """Set default rounding mode.

    Args:
        rounding (Rounding): rounding mode to be set as default

    Returns:
        Token: to be passed to :func:`reset_dflt_rounding_mode` in order
            to restore the previous default

    Raises:
        TypeError: given 'rounding' is not a valid rounding mode
    """
    if not isinstance(rounding, Rounding):
        raise TypeError(f"Illegal rounding mode: {rounding!r}")
    return _dflt_rounding.set(rounding)


def reset_dflt_rounding_mode(token: Token) -> None:
    """Restore the default rounding mode active before `token` was issued."""
    _dflt_rounding.reset(token)


@contextmanager
def localrounding(rounding: Rounding) -> Iterator[Rounding]:
    """Use `rounding` as default rounding mode inside a ``with`` block.

    The previous default is restored on leaving the block, also when it
    is left by an exception.
    """
    token = set_dflt_rounding_mode(rounding)
    try:
        yield rounding
    finally:
        reset_dflt_rounding_mode(token)


def resolve_rounding(rounding: Optional[Rounding]) -> Rounding:
    """Return `rounding`, or the current default if it is None."""
    if rounding is None:
        return _dflt_rounding.get()
    if not isinstance(rounding, Rounding):
        raise TypeError(f"Illegal rounding mode: {rounding!r}")
    return rounding


__all__ = [
    "get_dflt_rounding_mode",
    "set_dflt_rounding_mode",
    "reset_dflt_rounding_mode",
    "localrounding",
    "resolve_rounding",
]

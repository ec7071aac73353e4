"""
Threadcount notation: parse and serialize.

Grammar
-------
A threadcount is a whitespace-separated sequence of tokens::

    COLORCODE [/] COUNT [/]

``COLORCODE`` is one or more letters; ``COUNT`` is a positive integer.  A
``/`` immediately before or after the count marks the stripe as a pivot
(mirror point).  ``B/24 W4 B24 R2 K24 G24 W/2`` is the canonical form that
:func:`serialize` produces; the slash always sits before the count.

The notation layer is permissive: adjacent stripes sharing a color are
accepted here and only flagged by the generator.
"""

from __future__ import annotations

import logging
import re

from tartanism.errors import NotationError, NotationErrorKind
from tartanism.sett.types import Sett, ThreadStripe

logger = logging.getLogger(__name__)

_CODE_PREFIX = re.compile(r"([A-Za-z]*)(.*)", re.DOTALL)
_DIGITS = re.compile(r"\d+")


def _parse_token(token: str, position: int) -> ThreadStripe:
    code, rest = _CODE_PREFIX.fullmatch(token).groups()  # type: ignore[union-attr]
    if not code:
        raise NotationError(
            NotationErrorKind.MISSING_COLOR,
            f"token {position} ({token!r}) has no color code prefix",
            token=token,
            position=position,
        )

    is_pivot = False
    if rest.startswith("/"):
        is_pivot = True
        rest = rest[1:]
    if rest.endswith("/"):
        is_pivot = True
        rest = rest[:-1]

    if not _DIGITS.fullmatch(rest) or int(rest) < 1:
        raise NotationError(
            NotationErrorKind.INVALID_COUNT,
            f"token {position} ({token!r}) needs a positive integer thread count",
            token=token,
            position=position,
        )
    return ThreadStripe(color_code=code, count=int(rest), is_pivot=is_pivot)


def parse(text: str, name: str | None = None) -> Sett:
    """Parse threadcount notation into a :class:`Sett`.

    Raises:
        NotationError: ``EMPTY`` for blank input, ``MISSING_COLOR`` for a token
            without a letter prefix, ``INVALID_COUNT`` for a token whose count
            is missing, zero, negative, or not an integer.
    """
    tokens = text.split()
    if not tokens:
        raise NotationError(NotationErrorKind.EMPTY, "threadcount is empty")
    stripes = tuple(_parse_token(token, i) for i, token in enumerate(tokens))
    return Sett(stripes=stripes, name=name)


def parse_threadcount(text: str, name: str | None = None) -> Sett | None:
    """Lenient form of :func:`parse` for UI callers: return None on malformed input."""
    try:
        return parse(text, name=name)
    except NotationError as exc:
        logger.debug("Rejected threadcount %r: %s", text, exc)
        return None


def serialize(sett: Sett) -> str:
    """Return the canonical threadcount for *sett*.

    ``parse(serialize(sett))`` reconstructs an identical stripe list.
    """
    return sett.threadcount

import logging
import math
import numbers
from collections.abc import Sequence as _SequenceABC
from itertools import tee

import numpy as np
import pandas as pd

from .types import *
from .errors import require, exhausted
from .enumerable import IEnum

logger = logging.getLogger(__name__)

_NUL = '\0'


# --- borrowed ranges ---

class StdEnum(IEnum[T]):
    """
    a window [begin, end) into an existing random-access sequence.
    elements are read in place, never copied, so the sequence must outlive
    the enumerator and everything built on top of it.
    """

    def __init__(self, source: Sequence[T], begin: int = 0, end: Optional[int] = None):
        size = len(source)
        end = size if end is None else end
        # clamp like slice bounds do
        begin, end, _ = slice(begin, end).indices(size)
        self._source = source
        self._pos = begin
        self._end = max(begin, end)

    def current(self) -> T:
        if self.over(): raise exhausted(self, 'current')
        return self._source[self._pos]

    def over(self) -> bool:
        return self._pos == self._end

    def advance(self) -> None:
        if self.over(): raise exhausted(self, 'advance')
        self._pos += 1

    def __repr__(self) -> str:
        return f"StdEnum(pos={self._pos}, end={self._end}, source={type(self._source).__name__})"


class IterEnum(IEnum[T]):
    """
    cursor over an iterable without random access (sets, dicts, generators).
    holds one element of look-ahead, fetched on first use rather than at construction.
    """

    _DONE = object()
    _UNREAD = object()

    def __init__(self, iterable: Iterable[T]):
        self._it = iter(iterable)
        self._head = self._UNREAD

    def _peek(self) -> Any:
        if self._head is self._UNREAD:
            self._head = next(self._it, self._DONE)
        return self._head

    def current(self) -> T:
        if self.over(): raise exhausted(self, 'current')
        return self._head

    def over(self) -> bool:
        return self._peek() is self._DONE

    def advance(self) -> None:
        if self.over(): raise exhausted(self, 'advance')
        self._head = self._UNREAD

    def copy(self) -> 'IterEnum[T]':
        # tee so that neither side can starve the other
        clone = super().copy()
        self._it, clone._it = tee(self._it)
        return clone

    def __repr__(self) -> str:
        if self._head is self._UNREAD:
            state = 'unread'
        else:
            state = 'over' if self._head is self._DONE else f"head={self._head!r}"
        return f"IterEnum({state})"


def _text_length(text: Union[str, bytes, bytearray], begin: int) -> int:
    """length of the text from begin up to (not including) its first NUL"""
    terminator = _NUL if isinstance(text, str) else b'\0'
    stop = text.find(terminator, begin)
    return (len(text) if stop < 0 else stop) - begin


def ifrom(source: Any, begin: Optional[int] = None, end: Optional[int] = None) -> IEnum:
    """
    wrap an existing container without copying it.
    text is read up to its first NUL; pandas series are read by position;
    anything that is not indexable falls back to a look-ahead cursor.
    """
    if isinstance(source, IEnum):
        return source.copy()

    if isinstance(source, (str, bytes, bytearray)):
        start = 0 if begin is None else begin
        start = slice(start, None).indices(len(source))[0]
        stop = start + _text_length(source, start)
        if end is not None:
            stop = min(stop, slice(None, end).indices(len(source))[1])
        return StdEnum(source, start, stop)

    if isinstance(source, pd.Series):
        source = source.to_numpy()

    if isinstance(source, (_SequenceABC, np.ndarray)):
        return StdEnum(source, 0 if begin is None else begin, end)

    require(begin is None and end is None,
            "begin/end need an indexable source", source=type(source).__name__, begin=begin, end=end)
    return IterEnum(source)


# --- repetition ---

class RepeatEnum(IEnum[T]):
    """value, exactly n times. n defaults to 0, which is an empty sequence."""

    def __init__(self, value: T, n: int = 0):
        require(n >= 0, "repeat count must not be negative", n=n)
        self._value = value
        self._n = n
        self._i = 0

    def current(self) -> T:
        if self.over(): raise exhausted(self, 'current')
        return self._value

    def over(self) -> bool:
        return self._i == self._n

    def advance(self) -> None:
        if self.over(): raise exhausted(self, 'advance')
        self._i += 1

    def __repr__(self) -> str:
        return f"RepeatEnum(value={self._value!r}, n={self._n}, i={self._i})"


def irepeat(value: T, n: int = 0) -> RepeatEnum[T]:
    """create a bounded repetition of value"""
    return RepeatEnum(value, n)


# --- arithmetic progressions ---

class RangeEnum(IEnum[T]):
    """
    begin, begin + step, begin + 2*step, ... toward end.
    without a count the end must already sit on the progression and over()
    is plain equality; with one, exactly `count` values are produced.
    each value is begin + i*step, so rounding never accumulates.
    """

    def __init__(self, cur: T, end: T, step: T, count: Optional[int] = None):
        self._begin = cur
        self._cur = cur
        self._end = end
        self._step = step
        self._count = count
        self._i = 0

    def current(self) -> T:
        if self.over(): raise exhausted(self, 'current')
        return self._cur

    def over(self) -> bool:
        if self._count is None:
            return self._cur == self._end
        return self._i == self._count

    def advance(self) -> None:
        if self.over(): raise exhausted(self, 'advance')
        self._i += 1
        self._cur = self._begin + self._i * self._step

    def __repr__(self) -> str:
        return f"RangeEnum(cur={self._cur!r}, end={self._end!r}, step={self._step!r})"


def _is_integral(*values: Any) -> bool:
    return all(isinstance(v, numbers.Integral) for v in values)


def irange(*args: Any) -> RangeEnum:
    """
    irange(end), irange(begin, end) or irange(begin, end, step).
    without a step it is +1 when begin < end and -1 otherwise.
    a step pointing away from end is a PreconditionViolation.
    """
    require(1 <= len(args) <= 3, "irange takes end, (begin, end) or (begin, end, step)", args=args)
    if len(args) == 1:
        begin, end = 0, args[0]
    else:
        begin, end = args[0], args[1]
    step = args[2] if len(args) == 3 else (1 if begin < end else -1)

    require((step > 0 and begin <= end) or (step < 0 and begin >= end),
            "range step points away from its end", begin=begin, end=end, step=step)

    if _is_integral(begin, end, step):
        # move end onto the lattice begin + k*step so equality always terminates
        adjusted = end + (begin - end) % step
        logger.debug(f"irange({begin}, {end}, {step}) -> effective end {adjusted}")
        return RangeEnum(begin, adjusted, step)
    # same element count as numpy.arange
    count = max(0, math.ceil((end - begin) / step))
    logger.debug(f"irange({begin}, {end}, {step}) -> {count} values")
    return RangeEnum(begin, end, step, count)

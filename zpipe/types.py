from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Sequence
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
Accumulator = Callable[[U, T], U]
BinaryOp = Callable[[T, T], T]

# a stage is anything applied with `|`: a transformation or a terminal
Stage = Callable[[Any], Any]

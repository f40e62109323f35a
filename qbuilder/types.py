import math
import numbers
from collections.abc import Mapping
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
G = TypeVar('G')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
GroupSelector = Callable[[K, List[T]], G]
ResultSelector = Callable[[T, U], V]
FieldOrSelector = Union[str, Callable[[T], Any]]


class Grouping(Generic[K, G]):
    """a keyed group record produced by group_by and to_group"""

    __slots__ = ('key', 'group')

    def __init__(self, key: K, group: G):
        self.key = key
        self.group = group

    def __getitem__(self, name: str) -> Any:
        # field access for name-based operators
        if name == 'key': return self.key
        if name == 'group': return self.group
        raise KeyError(name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grouping):
            return NotImplemented
        return self.key == other.key and self.group == other.group

    def __iter__(self) -> Iterator[Any]:
        # unpacks as `key, group = grouping`
        return iter((self.key, self.group))

    def as_dict(self) -> Dict[str, Any]:
        return {'key': self.key, 'group': self.group}

    def __repr__(self) -> str:
        return f"Grouping(key={self.key!r}, group={self.group!r})"


def get_field(item: Any, key: str) -> Any:
    """read a named field from a mapping record or an attribute from any other object"""
    if isinstance(item, (Mapping, Grouping)):
        return item[key]
    return getattr(item, key)


def field_selector(key: FieldOrSelector[T]) -> Callable[[T], Any]:
    """turn a field name into a selector; callables pass through untouched"""
    if callable(key):
        return key
    return lambda item: get_field(item, key)


def to_number(value: Any, strict: bool = False) -> Union[int, float]:
    """
    coerce a field value to a number for sum/avg.

    bools count as 0/1, numbers pass through, numeric strings are parsed
    (including 0x/0o/0b prefixes) and the empty string reads as 0. anything
    else becomes nan, or raises a TypeError when `strict` is set. None is
    treated as missing, so it becomes nan rather than 0.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, numbers.Number):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text: return 0
        try: return int(text, 0)
        except ValueError: pass
        try: return int(text)
        except ValueError: pass
        try: return float(text)
        except ValueError: pass
    if strict:
        raise TypeError(f"value {value!r} is not numeric")
    return math.nan

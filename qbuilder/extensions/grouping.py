from __future__ import annotations
import logging
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import QueryBuilder

logger = logging.getLogger(__name__)

class _GroupingOperations(Generic[T]):
    def _partition(self: 'QueryBuilder[T]', key_selector: KeySelector[T, K]) -> Dict[K, List[T]]:
        """collect items per key; dicts keep first-seen key order"""
        groups: Dict[K, List[T]] = {}
        for item in self._get_data():
            key = key_selector(item)
            try:
                bucket = groups.get(key)
            except TypeError as exc:
                raise TypeError(
                    f"group key {key!r} is not hashable; normalize it to a tuple or string"
                ) from exc
            if bucket is None:
                groups[key] = [item]
            else:
                bucket.append(item)
        logger.debug("partitioned %d items into %d groups", len(self._get_data()), len(groups))
        return groups

    def group_by(self: 'QueryBuilder[T]', key_selector: KeySelector[T, K]) -> 'QueryBuilder[Grouping[K, List[T]]]':
        """group elements by a key, in first-seen key order"""
        return self._derive([Grouping(key, items) for key, items in self._partition(key_selector).items()])

    def to_group(self: 'QueryBuilder[T]', key_selector: KeySelector[T, K],
                 group_selector: GroupSelector[K, T, G]) -> List[Grouping[K, G]]:
        """group by key then shape each group's payload with group_selector(key, items)"""
        return [Grouping(key, group_selector(key, items))
                for key, items in self._partition(key_selector).items()]

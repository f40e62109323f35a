from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import QueryBuilder

class _CoreOperations(Generic[T]):
    def select(self: 'QueryBuilder[T]', *keys: FieldOrSelector[T]) -> 'QueryBuilder[Any]':
        """
        project each record down to the named fields, keeping their values.
        a single callable argument is used as a projection selector instead.
        """
        if len(keys) == 1 and callable(keys[0]):
            selector = keys[0]
            return self._derive([selector(x) for x in self._get_data()])
        return self._derive([{key: get_field(x, key) for key in keys} for x in self._get_data()])

    def where(self: 'QueryBuilder[T]', predicate: Predicate[T]) -> 'QueryBuilder[T]':
        """filter elements based on a predicate"""
        return self._derive([x for x in self._get_data() if predicate(x)])

    def order_by(self: 'QueryBuilder[T]', key: FieldOrSelector[T], descending: bool = False) -> 'QueryBuilder[T]':
        """sort by a field name (or key selector) using the values' natural ordering"""
        # reverse= flips the comparison itself, not the output of an ascending sort
        return self._derive(sorted(self._get_data(), key=field_selector(key), reverse=descending))

    def _count_arg(self: 'QueryBuilder[T]', count: int) -> int:
        if count < 0 and self._options.clamp_negative_counts:
            return 0
        return count

    def skip(self: 'QueryBuilder[T]', count: int) -> 'QueryBuilder[T]':
        """skip the first 'count' elements"""
        return self._derive(self._get_data()[self._count_arg(count):])

    def take(self: 'QueryBuilder[T]', count: int) -> 'QueryBuilder[T]':
        """take the first 'count' elements"""
        return self._derive(self._get_data()[:self._count_arg(count)])

    def page(self: 'QueryBuilder[T]', page_index: int, page_size: int) -> 'QueryBuilder[T]':
        """zero-based page of `page_size` elements"""
        return self.skip(page_index * page_size).take(page_size)

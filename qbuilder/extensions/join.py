from __future__ import annotations
import logging
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import QueryBuilder

logger = logging.getLogger(__name__)

class _JoinOperations(Generic[T]):
    def join(self: 'QueryBuilder[T]', other: Union[Iterable[U], 'QueryBuilder[U]'],
             key_selector: KeySelector[T, K],
             other_key_selector: KeySelector[U, K],
             result_selector: ResultSelector[T, U, V]) -> 'QueryBuilder[V]':
        """
        inner equi-join against a sequence or another query.

        the right side is indexed by key with the last item winning, so each
        left item produces at most one row. left items without a match are
        dropped and the output follows left order.
        """
        from ..query import QueryBuilder
        other_items = other._get_data() if isinstance(other, QueryBuilder) else other

        lookup: Dict[K, U] = {}
        overwritten = 0
        for other_item in other_items:
            other_key = other_key_selector(other_item)
            try:
                if other_key in lookup: overwritten += 1
            except TypeError as exc:
                raise TypeError(
                    f"join key {other_key!r} is not hashable; normalize it to a tuple or string"
                ) from exc
            lookup[other_key] = other_item
        if overwritten:
            logger.debug("join lookup kept the last of %d duplicate keys", overwritten)

        result = []
        for item in self._get_data():
            key = key_selector(item)
            try:
                matched = key in lookup
            except TypeError as exc:
                raise TypeError(
                    f"join key {key!r} is not hashable; normalize it to a tuple or string"
                ) from exc
            if matched:
                result.append(result_selector(item, lookup[key]))
        logger.debug("joined %d of %d items against %d keys", len(result), len(self._get_data()), len(lookup))
        return self._derive(result)

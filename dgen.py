r'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'

seeded fake-record generator feeding QueryBuilder tests.
'''

import numpy as np
from faker import Faker
from qbuilder import from_iterable, QueryBuilder
from typing import Any, Dict, Optional


class Generator:
    """schema interpreter.

    a schema is a dict of field -> definition, where a definition is one of:
      - 'word'                           a faker provider name
      - ('pyint', {'min_value': 1})      a faker provider with kwargs
      - {'_qen_provider': 'choice', 'from': [...]}
      - {'_qen_provider': 'sequence', 'start': 1}   incrementing ids
      - {'_qen_provider': 'ref', 'key': 'id'}       copy an earlier field
      - {'_qen_provider': 'literal', 'value': x}
      - any other value                  used as is
    """

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)
        self._sequences: Dict[str, int] = {}

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, field: str, config: Dict, record: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "choice":
            # pick an index so values keep their python type
            index = self._rng.integers(0, len(config["from"]))
            return config["from"][index]

        elif provider == "sequence":
            current = self._sequences.get(field, config.get("start", 1))
            self._sequences[field] = current + config.get("step", 1)
            return current

        elif provider == "ref":
            key = config["key"]
            if key not in record:
                raise ValueError(f"reference to '{key}' not found in current record.")
            return record[key]

        elif provider == "literal":
            if "value" not in config:
                raise ValueError("_qen_provider 'literal' requires a 'value' key.")
            return config["value"]

        raise ValueError(f"unknown _qen_provider: '{provider}'")

    def _create_field(self, field: str, field_def: Any, record: Dict) -> Any:
        if isinstance(field_def, dict) and "_qen_provider" in field_def:
            return self._resolve_provider(field, field_def, record)
        if isinstance(field_def, str) and hasattr(self._fake, field_def):
            return self._resolve_faker_method(field_def)
        if isinstance(field_def, tuple) and len(field_def) == 2 and isinstance(field_def[1], dict):
            return self._resolve_faker_method(field_def[0], field_def[1])
        return field_def

    def create(self, schema: Dict[str, Any]) -> Dict[str, Any]:
        # fields are built in order so refs can see earlier fields
        record: Dict[str, Any] = {}
        for field, field_def in schema.items():
            record[field] = self._create_field(field, field_def, record)
        return record


class _SchemaProvider:
    def __init__(self, schema: Dict[str, Any], seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def records(self, count: int) -> list:
        return [self._generator.create(self._schema) for _ in range(count)]

    def take(self, count: int) -> QueryBuilder:
        return from_iterable(self.records(count))


def from_schema(schema: Dict[str, Any], seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)

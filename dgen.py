'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'
'''

import numpy as np
from faker import Faker
from pullq import PullIterator, Producible, iterate
from typing import Any, Dict, Optional


class Generator:
    """
    schema interpreter.

    a schema is a dict of field -> spec, where a spec is one of:
      'word'                                   faker provider by name
      ('pyint', {'min_value': 1})              faker provider with kwargs
      {'_qen_provider': 'choice', 'from': [..]} pick from a list
      {'_qen_provider': 'ref', 'key': 'id'}    copy an earlier field
      {'_qen_provider': 'literal', 'value': x} a fixed value
      nested dicts                             generated recursively
    anything else is returned unchanged.
    """

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _call_faker(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict, context: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "choice":
            # numpy scalars are turned back into native python values
            picked = self._rng.choice(config["from"])
            return picked.item() if hasattr(picked, 'item') else picked
        if provider == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current record.")
            return context[key]
        if provider == "literal":
            if "value" not in config:
                raise ValueError("_qen_provider 'literal' requires a 'value' key.")
            return config["value"]
        raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        context = context or {}

        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._resolve_provider(schema, context)
            record = {}
            for field, spec in schema.items():
                # refs can see the parent record and fields generated so far
                record[field] = self.create(spec, {**context, **record})
            return record

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._call_faker(schema)
            return schema

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._call_faker(schema[0], schema[1])

        return schema


class SchemaSource(Producible[Any]):
    """an unbounded source of generated records. never reports exhaustion."""

    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def pull_next(self) -> Any:
        return self._generator.create(self._schema)


def from_schema(schema: Any, seed: Optional[int] = None) -> PullIterator:
    """endless iterator of records for schema. bound it with take() before anything else."""
    return iterate(SchemaSource(schema, seed))

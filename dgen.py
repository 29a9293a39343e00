"""
schema-driven test data for the seqops test suites.

a schema is a plain python value:
  - 'word'                                 -> faker provider called with no arguments
  - ('pyint', {'min_value': 1})            -> faker provider called with kwargs
  - {'_qen_provider': 'choice', 'from': []} -> numpy rng choice
  - {'_qen_provider': 'literal', 'value': x}
  - {'_qen_provider': 'ref', 'key': 'k'}   -> value generated earlier in the same object
  - {'k': schema, ...}                     -> dict built key by key
  - [{'_qen_items': schema, '_qen_count': n or (low, high)}]
"""

import numpy as np
from faker import Faker
from itertools import count
from seqops import from_iterable, Enumerable
from typing import Any, Dict, Optional


class Generator:
    """schema interpreter."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict, context: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current context.")
            return context[key]

        elif provider == "choice":
            # convert numpy's choice result to a native python type
            choice_result = self._rng.choice(config["from"])
            return choice_result.item() if hasattr(choice_result, 'item') else choice_result

        elif provider == "literal":
            if "value" not in config:
                raise ValueError("_qen_provider 'literal' requires a 'value' key.")
            return config["value"]

        raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        current_context = context or {}

        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._resolve_provider(schema, current_context)

            # refs can look up into the parent and sideways into the local object
            generated_obj = {}
            for k, v in schema.items():
                generated_obj[k] = self.create(v, {**current_context, **generated_obj})
            return generated_obj

        if isinstance(schema, list):
            if not schema: return []
            item_schema = schema[0]
            actual_item_schema = item_schema.get('_qen_items', item_schema)
            return [self.create(actual_item_schema, current_context) for _ in range(self._get_count(item_schema))]

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._resolve_faker_method(schema)
            return schema  # otherwise, it's a literal string.

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema

    def _get_count(self, item_schema: Any) -> int:
        count_config = item_schema.get("_qen_count", 5) if isinstance(item_schema, dict) else 5
        if isinstance(count_config, (list, tuple)) and len(count_config) == 2:
            low, high = count_config
            return int(self._rng.integers(low, high, endpoint=True))
        return count_config


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._seed = seed

    def take(self, count: int) -> Enumerable:
        """a fixed, re-iterable batch of generated values"""
        generator = Generator(self._seed)
        return from_iterable([generator.create(self._schema) for _ in range(count)])

    def stream(self) -> Enumerable:
        """an infinite sequence; every pass restarts from the seed"""
        def data_func():
            generator = Generator(self._seed)
            return (generator.create(self._schema) for _ in count())
        return Enumerable(data_func)


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)

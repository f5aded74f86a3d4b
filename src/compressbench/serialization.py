"""Dataset serialization for benchmarks.

Every configuration in a run compresses the same bytes, so the encoding must
be deterministic: field order is preserved and separators are compact.
"""

import json
from collections.abc import Sequence
from typing import Any


class JsonSerializer:
    """UTF-8 JSON encoding of a dataset."""

    name = "json"

    def encode(self, dataset: Sequence[Any]) -> bytes:
        """Encode a dataset to canonical bytes."""
        return json.dumps(
            list(dataset),
            ensure_ascii=False,
            separators=(",", ":"),
            allow_nan=False,
        ).encode("utf-8")

    def decode(self, data: bytes) -> list[Any]:
        """Decode bytes produced by :meth:`encode`."""
        return json.loads(data.decode("utf-8"))

    def normalize(self, dataset: Sequence[Any]) -> list[Any]:
        """Return the dataset as :meth:`decode` would rebuild it.

        Tuples become lists, which is the only shape change a JSON round-trip
        makes to well-formed records.
        """
        return [_normalize_value(item) for item in dataset]


def _normalize_value(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _normalize_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_normalize_value(v) for v in value]
    return value

"""Tests for dataset serialization."""

from benchmarks.transactions import generate_transactions
from compressbench.serialization import JsonSerializer


class TestJsonSerializer:
    def test_round_trip(self):
        serializer = JsonSerializer()
        dataset = [{"a": 1, "b": "two", "c": {"d": [1.5, None, True]}}]
        assert serializer.decode(serializer.encode(dataset)) == dataset

    def test_empty_dataset(self):
        serializer = JsonSerializer()
        assert serializer.encode([]) == b"[]"
        assert serializer.decode(b"[]") == []

    def test_compact_and_ordered(self):
        assert JsonSerializer().encode([{"b": 1, "a": 2}]) == b'[{"b":1,"a":2}]'

    def test_deterministic(self):
        dataset = generate_transactions(50, seed=3, base_timestamp_ms=1_000)
        serializer = JsonSerializer()
        assert serializer.encode(dataset) == serializer.encode(dataset)
        again = generate_transactions(50, seed=3, base_timestamp_ms=1_000)
        assert serializer.encode(dataset) == serializer.encode(again)

    def test_unicode_is_utf8(self):
        encoded = JsonSerializer().encode([{"name": "café"}])
        assert "café".encode() in encoded
        assert JsonSerializer().decode(encoded) == [{"name": "café"}]

    def test_normalize_tuples(self):
        serializer = JsonSerializer()
        assert serializer.normalize(({"a": (1, (2, 3))},)) == [{"a": [1, [2, 3]]}]

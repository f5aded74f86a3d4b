"""Synthetic transaction records for benchmarks."""

import random
import string
import time
from typing import Any

ALPHABET = string.ascii_letters + string.digits


def random_string(rng: random.Random, length: int) -> str:
    """Random alphanumeric string of the given length."""
    return "".join(rng.choices(ALPHABET, k=length))


def generate_transaction(rng: random.Random, index: int, base_timestamp_ms: int) -> dict[str, Any]:
    """Build one transaction record.

    Optional fields are left out rather than set to None, so every record
    survives a JSON round-trip unchanged.
    """
    tx: dict[str, Any] = {
        "type": random_string(rng, 10),
        "tx_hash": random_string(rng, 64),
        "internal_tx_id": random_string(rng, 32),
        "from": random_string(rng, 34),
        "to": random_string(rng, 34),
        "amount": f"{rng.random() * 1_000_000:.2f}",
        "fee": f"{rng.random() * 1000:.4f}",
        "payway": random_string(rng, 5),
    }
    if index % 10 == 0:
        tx["contract_id"] = random_string(rng, 20)
    tx["result"] = random_string(rng, 7)
    tx["expiration"] = base_timestamp_ms + index * 1000
    if index % 5 == 0:
        tx["extra"] = random_string(rng, 50)
    if index % 3 == 0:
        tx["tx_data"] = {"raw": random_string(rng, 100)}
    if index % 7 == 0:
        tx["tx_info"] = {"info": random_string(rng, 100)}
    return tx


def generate_transactions(
    count: int,
    seed: int | None = None,
    base_timestamp_ms: int | None = None,
) -> list[dict[str, Any]]:
    """Generate a dataset of transaction records.

    Args:
        count: Number of records
        seed: Random seed. Fixing both seed and base_timestamp_ms makes the
            dataset reproducible.
        base_timestamp_ms: Expiration of the first record. Defaults to now.

    Returns:
        List of transaction dicts
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    rng = random.Random(seed)
    if base_timestamp_ms is None:
        base_timestamp_ms = int(time.time() * 1000)
    return [generate_transaction(rng, i, base_timestamp_ms) for i in range(count)]


def summarize_dataset(dataset: list[dict[str, Any]]) -> dict:
    """Get summary statistics about a dataset."""
    if not dataset:
        return {"total_records": 0}

    optional_fields = ["contract_id", "extra", "tx_data", "tx_info"]
    return {
        "total_records": len(dataset),
        "optional_field_counts": {
            name: sum(1 for tx in dataset if name in tx) for name in optional_fields
        },
    }

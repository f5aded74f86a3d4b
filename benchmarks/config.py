"""Configuration for benchmark runs."""

import os
from dataclasses import dataclass, field
from pathlib import Path

# Read defaults from environment
DEFAULT_RECORD_COUNT = int(os.environ.get("COMPRESSBENCH_RECORDS", "10000"))
DEFAULT_SEED = int(os.environ["COMPRESSBENCH_SEED"]) if os.environ.get("COMPRESSBENCH_SEED") else None
DEFAULT_LOG_LEVEL = os.environ.get("COMPRESSBENCH_LOG_LEVEL", "INFO")


@dataclass
class BenchmarkConfig:
    """Configuration for benchmark runs."""

    output_dir: Path
    record_count: int = DEFAULT_RECORD_COUNT
    seed: int | None = DEFAULT_SEED
    suites: list[str] = field(default_factory=lambda: ["default"])

    def __post_init__(self) -> None:
        """Ensure output_dir is a Path, the directory exists and counts are sane."""
        if self.record_count < 0:
            raise ValueError(f"record_count must be >= 0, got {self.record_count}")
        self.output_dir = Path(self.output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

"""Load and validate benchmark tables from JSON files."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path

from roas_engine.benchmarks.schema import BenchmarkTable
from roas_engine.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Default directory for benchmark config files
_CONFIG_DIR = Path(__file__).parent / "configs"
_DEFAULT_FILE = "market_segments_v1.json"


def load_benchmarks(file_path: Path | None = None) -> BenchmarkTable:
    """Load and validate a benchmark table from a JSON file.

    If no path is provided, loads the bundled market segment table.
    """
    if file_path is None:
        file_path = _CONFIG_DIR / _DEFAULT_FILE

    if not file_path.exists():
        raise FileNotFoundError(f"Benchmark config not found: {file_path}")

    with open(file_path, "r") as f:
        raw = json.load(f)

    table = BenchmarkTable.model_validate(raw)
    logger.debug(f"Loaded {len(table.segments)} benchmark segments from {file_path}")
    return table


@lru_cache(maxsize=8)
def _load_configured(path: str) -> BenchmarkTable:
    return load_benchmarks(Path(path))


@lru_cache(maxsize=1)
def get_default_benchmarks() -> BenchmarkTable:
    """Load the configured benchmark table (bundled unless overridden)."""
    configured = get_settings().benchmark_config_path
    return _load_configured(configured) if configured else load_benchmarks()


def resolve_benchmarks(
    benchmarks: BenchmarkTable | None = None,
    settings: Settings | None = None,
) -> BenchmarkTable:
    """Pick the table for a calculation.

    An explicit table wins; otherwise the table named by the given settings,
    falling back to the process-wide default.
    """
    if benchmarks is not None:
        return benchmarks
    if settings is not None and settings.benchmark_config_path:
        return _load_configured(settings.benchmark_config_path)
    return get_default_benchmarks()

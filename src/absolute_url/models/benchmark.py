from __future__ import annotations

from pydantic import BaseModel


class BenchmarkCase(BaseModel):
    """A single input exercised in a tight loop."""

    name: str
    url: str
    http_only: bool = True


class BenchmarkResult(BaseModel):
    """Timing for one BenchmarkCase."""

    name: str
    iterations: int
    duration_ms: float
    ops_per_second: float

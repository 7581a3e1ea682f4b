from typing import Any, List, Sequence
from pydantic import BaseModel, ConfigDict, Field

class TimingSample(BaseModel):
    """Elapsed time of one timed call"""
    elapsed_ms: float = Field(ge=0)

class BenchmarkSummary(BaseModel):
    """Average, minimum and maximum over the timed calls"""
    iterations: int = 0
    average_ms: float = 0.0
    min_ms: float = 0.0
    max_ms: float = 0.0

    @classmethod
    def from_samples(cls, samples: Sequence[TimingSample]) -> "BenchmarkSummary":
        if not samples:
            return cls()
        values = [sample.elapsed_ms for sample in samples]
        return cls(
            iterations=len(values),
            average_ms=sum(values) / len(values),
            min_ms=min(values),
            max_ms=max(values)
        )

    @property
    def has_data(self) -> bool:
        return self.iterations > 0

class StrategyRun(BaseModel):
    """Timings collected for one strategy"""
    name: str
    samples: List[TimingSample] = []
    first_result: Any = None

    @property
    def summary(self) -> BenchmarkSummary:
        return BenchmarkSummary.from_samples(self.samples)

class ComparisonResult(BaseModel):
    """Both strategy runs of a successful comparison"""
    run_a: StrategyRun
    run_b: StrategyRun

    @property
    def faster(self) -> str:
        """Name of the strategy with the smaller mean, A on a tie"""
        if self.run_b.summary.average_ms < self.run_a.summary.average_ms:
            return self.run_b.name
        return self.run_a.name

    @property
    def slower(self) -> str:
        if self.faster == self.run_a.name:
            return self.run_b.name
        return self.run_a.name

    @property
    def difference_ms(self) -> float:
        return abs(self.run_a.summary.average_ms - self.run_b.summary.average_ms)

    @property
    def gain_percent(self) -> float:
        """Improvement of the faster strategy relative to the slower one"""
        baseline = max(self.run_a.summary.average_ms, self.run_b.summary.average_ms)
        if baseline == 0:
            return 0.0
        return self.difference_ms / baseline * 100

class ComparisonFailure(BaseModel):
    """A comparison aborted by the first failing call"""
    strategy: str
    stage: str
    error: Exception
    completed: List[StrategyRun] = []

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @property
    def message(self) -> str:
        return f"{self.strategy} failed during {self.stage}: {self.error}"

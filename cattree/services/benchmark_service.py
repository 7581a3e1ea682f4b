import logging
import time
from typing import Any, Awaitable, Callable, List, Union
from ..models.benchmark import ComparisonFailure, ComparisonResult, StrategyRun, TimingSample

class BenchmarkStrategy:
    """A named retrieval strategy"""

    def __init__(self, name: str, fetch: Callable[[], Awaitable[Any]]):
        self.name = name
        self.fetch = fetch

    def __repr__(self):
        return f"BenchmarkStrategy({self.name!r})"

class StrategyFailed(Exception):
    """Internal signal carrying the stage and partial run of a failed strategy"""

    def __init__(self, run: StrategyRun, stage: str, error: Exception):
        self.run = run
        self.stage = stage
        self.error = error
        super().__init__(str(error))

class BenchmarkService:
    """Times strategies sequentially and compares their means"""

    def __init__(self, clock: Callable[[], float] = time.perf_counter):
        self.clock = clock
        self.logger = logging.getLogger(__name__)

    async def run_strategy(self, strategy: BenchmarkStrategy, iterations: int) -> StrategyRun:
        """One untimed warm-up call, then ``iterations`` timed calls"""
        run = StrategyRun(name=strategy.name)
        stage = "warm-up"
        try:
            await strategy.fetch()
            for i in range(iterations):
                stage = f"iteration {i + 1}"
                started = self.clock()
                result = await strategy.fetch()
                elapsed_ms = (self.clock() - started) * 1000
                run.samples.append(TimingSample(elapsed_ms=max(elapsed_ms, 0.0)))
                if i == 0:
                    run.first_result = result
                self.logger.debug(f"{strategy.name} {stage}: {elapsed_ms:.2f} ms")
        except Exception as e:
            raise StrategyFailed(run, stage, e) from e

        summary = run.summary
        self.logger.info(
            f"{strategy.name}: avg={summary.average_ms:.2f}ms "
            f"min={summary.min_ms:.2f}ms max={summary.max_ms:.2f}ms"
        )
        return run

    async def compare(
        self,
        strategy_a: BenchmarkStrategy,
        strategy_b: BenchmarkStrategy,
        iterations: int
    ) -> Union[ComparisonResult, ComparisonFailure]:
        """Run A to completion, then B; the first failure ends the comparison"""
        if isinstance(iterations, bool) or not isinstance(iterations, int) or iterations < 1:
            raise ValueError(f"iterations must be a positive integer, got {iterations!r}")

        completed: List[StrategyRun] = []
        for strategy in (strategy_a, strategy_b):
            try:
                completed.append(await self.run_strategy(strategy, iterations))
            except StrategyFailed as failed:
                failure = ComparisonFailure(
                    strategy=strategy.name,
                    stage=failed.stage,
                    error=failed.error,
                    completed=completed + [failed.run]
                )
                self.logger.error(f"Comparison aborted: {failure.message}")
                return failure

        result = ComparisonResult(run_a=completed[0], run_b=completed[1])
        self.logger.info(
            f"{result.faster} faster by {result.gain_percent:.2f}% "
            f"({result.difference_ms:.2f} ms)"
        )
        return result

import logging
from datetime import datetime
from typing import Callable, Optional
import pytz
from .config import Config
from .constants import ASSEMBLED_STRATEGY_NAME, RECURSIVE_STRATEGY_NAME
from .database.database import Database
from .exceptions import CategoryTreeError
from .models.benchmark import ComparisonFailure
from .services import (
    BenchmarkService,
    BenchmarkStrategy,
    CategorySeedService,
    CategoryTreeService,
    SqlCategoryTreeService
)
from .utils.formatters import render_flat, render_tree
from .utils.messages import Messages

class CategoryTreeBenchmark:
    def __init__(
        self,
        db: Optional[Database] = None,
        benchmark: Optional[BenchmarkService] = None,
        output: Callable[[str], None] = print
    ):
        """Wire the services around one database"""
        self.db = db or Database()
        self.benchmark = benchmark or BenchmarkService()
        self.output = output
        self.logger = logging.getLogger(__name__)

        self.tree_service = CategoryTreeService(self.db)
        self.sql_tree_service = SqlCategoryTreeService(self.db)
        self.seed_service = CategorySeedService(self.db)

    def _print(self, *lines: str):
        for line in lines:
            self.output(line)

    async def start(self, iterations: Optional[int] = None) -> int:
        """Connect, run the comparison and report; return the exit status"""
        iterations = iterations or Config.BENCHMARK_ITERATIONS
        self._print(
            Messages.header("CATEGORY TREE PERFORMANCE COMPARISON", datetime.now(pytz.utc)),
            ""
        )
        try:
            await self.db.connect()
            await self.seed_service.ensure_seeded(Config.SEED_FILE)
            outcome = await self.benchmark.compare(
                BenchmarkStrategy(ASSEMBLED_STRATEGY_NAME, self.tree_service.get_category_tree),
                BenchmarkStrategy(RECURSIVE_STRATEGY_NAME, self.sql_tree_service.get_category_tree),
                iterations
            )
        except (CategoryTreeError, OSError, ValueError) as e:
            self.logger.error(f"Benchmark setup failed: {e}", exc_info=True)
            self._print(Messages.error(str(e)))
            return 1
        finally:
            await self.db.close()

        if isinstance(outcome, ComparisonFailure):
            self._print(Messages.error(f"Comparison failed: {outcome.message}"))
            return 1

        for index, (run, render) in enumerate(
            ((outcome.run_a, render_tree), (outcome.run_b, render_flat)), start=1
        ):
            self._print(
                Messages.strategy_title(index, run.name),
                "Category Tree (first timed run):",
                "",
                *render(run.first_result or []),
                "",
                Messages.performance_metrics(run.summary),
                ""
            )

        self._print(Messages.comparison_summary(outcome), Messages.separator())
        return 0

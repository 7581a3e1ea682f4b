from datetime import datetime
from typing import Optional
from ..constants import SEPARATOR_WIDTH, SEPARATOR_CHAR, SUB_SEPARATOR_CHAR
from ..models.benchmark import BenchmarkSummary, ComparisonResult
from .formatters import format_datetime, format_duration, format_percent

class Messages:
    @staticmethod
    def separator() -> str:
        return SEPARATOR_CHAR * SEPARATOR_WIDTH

    @staticmethod
    def sub_separator() -> str:
        return SUB_SEPARATOR_CHAR * SEPARATOR_WIDTH

    @staticmethod
    def header(title: str, started_at: Optional[datetime] = None) -> str:
        """Centered title between separators"""
        lines = [Messages.separator(), title.center(SEPARATOR_WIDTH).rstrip()]
        if started_at is not None:
            lines.append(f"Started {format_datetime(started_at)}".center(SEPARATOR_WIDTH).rstrip())
        lines.append(Messages.separator())
        return "\n".join(lines)

    @staticmethod
    def strategy_title(index: int, name: str) -> str:
        return f"APPROACH {index}: {name}\n{Messages.sub_separator()}"

    @staticmethod
    def performance_metrics(summary: BenchmarkSummary) -> str:
        """Average, min and max of one strategy"""
        if not summary.has_data:
            return "Performance: no data"
        return (
            f"Performance ({summary.iterations} iterations):\n"
            f"  Average: {format_duration(summary.average_ms)}\n"
            f"  Min:     {format_duration(summary.min_ms)}\n"
            f"  Max:     {format_duration(summary.max_ms)}"
        )

    @staticmethod
    def comparison_summary(result: ComparisonResult) -> str:
        """Means side by side and the gain of the faster strategy"""
        width = max(len(result.run_a.name), len(result.run_b.name), len("Difference")) + 2
        return (
            "Summary\n\n"
            f"{(result.run_a.name + ':').ljust(width)}{format_duration(result.run_a.summary.average_ms)}\n"
            f"{(result.run_b.name + ':').ljust(width)}{format_duration(result.run_b.summary.average_ms)}\n"
            f"{'Difference:'.ljust(width)}{format_duration(result.difference_ms)}\n"
            f"{'Gain:'.ljust(width)}{format_percent(result.gain_percent)} "
            f"faster with {result.faster} (relative to {result.slower})"
        )

    @staticmethod
    def error(message: str) -> str:
        return f"[ERROR] {message}"

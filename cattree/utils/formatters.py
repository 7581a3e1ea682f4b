from datetime import datetime
from typing import List, Sequence
import pytz
from ..config import Config
from ..constants import INDENT_PER_LEVEL
from ..models.category import CategoryNode, FlatCategoryRow

def format_duration(ms: float) -> str:
    """Format milliseconds"""
    return f"{ms:.2f} ms"

def format_percent(value: float) -> str:
    return f"{value:.2f}%"

def format_datetime(dt: datetime) -> str:
    """Format a timestamp in the configured timezone"""
    local_tz = pytz.timezone(Config.TIMEZONE)
    if dt.tzinfo is None:
        dt = pytz.utc.localize(dt)
    return dt.astimezone(local_tz).strftime("%Y-%m-%d %H:%M:%S %Z")

def format_category_line(name: str, level: int, depth: int) -> str:
    return f"{' ' * (depth * INDENT_PER_LEVEL)}├─ {name} (Level {level})"

def render_tree(nodes: Sequence[CategoryNode]) -> List[str]:
    """Nested tree, indented by depth"""
    lines = []
    stack = [(node, 0) for node in reversed(nodes)]
    while stack:
        node, depth = stack.pop()
        lines.append(format_category_line(node.name, node.level, depth))
        stack.extend((child, depth + 1) for child in reversed(node.children))
    return lines

def render_flat(rows: Sequence[FlatCategoryRow]) -> List[str]:
    """Flat rows, indented by their level"""
    return [format_category_line(row.name, row.level, row.level) for row in rows]

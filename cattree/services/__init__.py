"""Category tree services"""
from .category_tree_service import CategoryTreeService, assemble
from .sql_category_tree_service import SqlCategoryTreeService
from .benchmark_service import BenchmarkService, BenchmarkStrategy
from .seed_service import CategorySeedService

__all__ = [
    'CategoryTreeService',
    'SqlCategoryTreeService',
    'BenchmarkService',
    'BenchmarkStrategy',
    'CategorySeedService',
    'assemble'
]

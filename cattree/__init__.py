"""Compare in-process and recursive-query retrieval of a category tree"""

__version__ = "0.1.0"

from typing import List
from .base import CategoryRecord

class Category(CategoryRecord):
    """Category row as stored in the categories table"""

class FlatCategoryRow(CategoryRecord):
    """Category row from the recursive query, hierarchy encoded by level and order"""

class CategoryNode(CategoryRecord):
    """Category with its assembled subtree"""
    children: List['CategoryNode'] = []

    def walk(self):
        """Yield this node and its descendants in pre-order"""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

def flatten(nodes: List[CategoryNode]) -> List[CategoryNode]:
    """Pre-order listing of a forest"""
    return [node for root in nodes for node in root.walk()]

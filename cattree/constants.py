# Recursive query
TREE_FUNCTION_NAME = "get_category_tree"
SEGMENT_SEPARATOR = "\x01"
ID_SEPARATOR = "\x02"
ID_PAD_WIDTH = 10

# Category limits
NAME_MAX_LENGTH = 200

# Display
SEPARATOR_WIDTH = 80
SEPARATOR_CHAR = "="
SUB_SEPARATOR_CHAR = "-"
INDENT_PER_LEVEL = 2

# Strategy labels
ASSEMBLED_STRATEGY_NAME = "In-process assembly"
RECURSIVE_STRATEGY_NAME = "Recursive query"

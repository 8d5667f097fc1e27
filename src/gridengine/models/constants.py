# ==============================================================================
# Synthetic Field Names
# ==============================================================================

# Row identity and lifecycle fields (engine-private, stripped on export)
ROW_KEY_FIELD = "_row_key"
ROW_STATUS_FIELD = "_row_status"

# Tree bookkeeping fields written by the tree service
TREE_ID_FIELD = "_tree_id"
TREE_PARENT_ID_FIELD = "_tree_parent_id"
TREE_LEVEL_FIELD = "_tree_level"
TREE_HAS_CHILDREN_FIELD = "_tree_has_children"
TREE_EXPANDED_FIELD = "_tree_expanded"

TREE_FIELDS: tuple[str, ...] = (
    TREE_ID_FIELD,
    TREE_PARENT_ID_FIELD,
    TREE_LEVEL_FIELD,
    TREE_HAS_CHILDREN_FIELD,
    TREE_EXPANDED_FIELD,
)

SYNTHETIC_ROW_FIELDS: frozenset[str] = frozenset({ROW_KEY_FIELD, ROW_STATUS_FIELD, *TREE_FIELDS})

# ==============================================================================
# Synthetic Columns
# ==============================================================================

ROW_NUMBER_FIELD = "__row_num__"
ROW_CHECK_FIELD = "__row_check__"

SYNTHETIC_COLUMN_FIELDS: frozenset[str] = frozenset({ROW_NUMBER_FIELD, ROW_CHECK_FIELD})

ROW_NUMBER_WIDTH = 50
ROW_CHECK_WIDTH = 32

# ==============================================================================
# Layout Defaults
# ==============================================================================

DEFAULT_ROW_HEIGHT = 32
DEFAULT_COL_WIDTH = 100
MIN_COL_WIDTH = 40
DEFAULT_TREE_INDENT = 16

# Rows rendered above/below the viewport
OVERSCAN_ROWS = 5

# ==============================================================================
# Paging / History Defaults
# ==============================================================================

DEFAULT_PAGE_SIZE = 15
PAGE_SIZE_OPTIONS: tuple[int, ...] = (15, 30, 50, 100)

# Maximum number of history snapshots to retain
MAX_UNDO_DEPTH = 20

# Separator used in "row_key::field" selection membership strings
CELL_KEY_SEPARATOR = "::"

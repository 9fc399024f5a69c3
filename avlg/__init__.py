from .avlg_tree import AVLGTree
from .bounds import max_height, min_height, min_nodes
from .exceptions import EmptyTreeError, InvalidBalanceError

__all__ = [
    "AVLGTree",
    "EmptyTreeError",
    "InvalidBalanceError",
    "max_height",
    "min_height",
    "min_nodes",
]

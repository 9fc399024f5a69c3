class InvalidBalanceError(ValueError):
    """Raised when an AVL-G tree is configured with an imbalance bound below 1."""


class EmptyTreeError(ValueError):
    """Raised when an operation needs at least one key but the tree is empty."""

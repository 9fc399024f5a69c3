"""
Height bounds for AVL-G trees.

The tallest AVL-G tree with a given number of keys is the one built from the
fewest nodes per level: a root whose children have heights h - 1 and
h - 1 - G. Counting those minimal trees gives the recurrence

    N(-1) = 0, N(0) = 1, N(h) = 1 + N(h - 1) + N(h - 1 - G)

and max_height(n, G) is the largest h with N(h) <= n. For G = 1 this is the
classic Fibonacci-based AVL bound; it loosens as G grows.
"""

from typing import List

from .exceptions import InvalidBalanceError


def validate_bound(imbalance_bound: int) -> None:
    if isinstance(imbalance_bound, bool) or not isinstance(imbalance_bound, int):
        raise InvalidBalanceError(f"imbalance bound must be an int, got {imbalance_bound!r}")
    if imbalance_bound < 1:
        raise InvalidBalanceError(f"imbalance bound must be >= 1, got {imbalance_bound}")


def min_nodes(height: int, imbalance_bound: int) -> int:
    """Fewest keys an AVL-G tree of the given height can hold."""
    validate_bound(imbalance_bound)
    if height < 0:
        return 0
    # counts[k] holds N(k - 1), so counts[0] is the empty tree
    counts: List[int] = [0, 1]
    for h in range(1, height + 1):
        shorter = h - 1 - imbalance_bound
        counts.append(1 + counts[h] + (counts[shorter + 1] if shorter >= -1 else 0))
    return counts[height + 1]


def max_height(count: int, imbalance_bound: int) -> int:
    """
    Largest height an AVL-G tree holding `count` keys can reach.

    Args:
        count: Number of keys in the tree, >= 0
        imbalance_bound: The tree's G, >= 1

    Returns:
        -1 for an empty tree, otherwise the height bound
    """
    validate_bound(imbalance_bound)
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if count == 0:
        return -1

    counts: List[int] = [0, 1]
    height = 0
    while True:
        h = height + 1
        shorter = h - 1 - imbalance_bound
        needed = 1 + counts[h] + (counts[shorter + 1] if shorter >= -1 else 0)
        if needed > count:
            return height
        counts.append(needed)
        height = h


def min_height(count: int) -> int:
    """Height of a perfectly packed binary tree with `count` keys."""
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if count == 0:
        return -1
    # ceil(log2(count + 1)) - 1, without floating point
    return count.bit_length() - 1

from twig.common import Comparable, Flip, Impossible, Ordering, compare
from twig.tree import PTree, PTreeBranch, PTreeEmpty, PTreeLeaf

__all__ = [
    "Comparable",
    "Flip",
    "Impossible",
    "Ordering",
    "PTree",
    "PTreeBranch",
    "PTreeEmpty",
    "PTreeLeaf",
    "compare",
]

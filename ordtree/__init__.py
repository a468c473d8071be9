__version__ = '0.1.0'

from .exception import (
        OrdTreeError,
        KeyNotFoundError,
        DuplicateKeyError,
        IndexOutOfRangeError
    )
from .tree.bstree import (
        BSTree,
        BSTreeNode,
        DUP_OVERWRITE,
        DUP_REJECT,
        DUP_MULTISET
    )

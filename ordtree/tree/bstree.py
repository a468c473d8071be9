from .. import log
from ..fifo import Queue
from ..exception import (
        DuplicateKeyError,
        IndexOutOfRangeError,
        KeyNotFoundError
    )

# what insert() does with a key that is already in the tree
DUP_OVERWRITE = 'overwrite'
DUP_REJECT = 'reject'
DUP_MULTISET = 'multiset'

DUPLICATE_POLICIES = (DUP_OVERWRITE, DUP_REJECT, DUP_MULTISET)

class BSTreeNode(object):
    """A node of an unbalanced binary search tree."""

    def __init__(self, k=None, v=None, nil=None, parent=None):
        self.key = k
        self.value = v

        self.left = nil
        self.right = nil
        self.parent = parent if parent is not None else nil

class BSTree(object):
    """Unbalanced binary search tree mapping orderable keys to values.

    Empty child and parent slots point at the sentinel node self.nil; an
    empty tree is one whose root is self.nil. All walks are iterative, so
    degenerate (list-shaped) trees do not hit the recursion limit.
    """

    def __init__(self, items=None, node_type=BSTreeNode,
                 duplicates=DUP_OVERWRITE):
        if duplicates not in DUPLICATE_POLICIES:
            raise ValueError("invalid duplicate key policy: " + str(duplicates))
        self.node_type = node_type
        self.duplicates = duplicates
        self.nil = self.node_type(k=None, v=None)
        self.root = self.nil
        self.root.parent = self.nil
        self._size = 0
        if items is not None:
            for k, v in items:
                self.insert(k, v)

    def is_empty(self):
        return self.root is self.nil

    def size(self):
        """Returns the number of nodes stored in the tree.

        Time complexity: O(1)"""
        return self._size

    def __len__(self):
        return self._size

    def __contains__(self, k):
        return self.contains(k)

    def contains(self, k):
        return self.find_node(k) is not None

    def find_node(self, k):
        """Finds the node with key k. Returns None if k is not found.

        With duplicate keys, the node closest to the root is returned.
        Time complexity: O(h)"""
        x = self.root
        while x is not self.nil and k != x.key:
            if k < x.key:
                x = x.left
            else:
                x = x.right
        return x if x is not self.nil else None

    def find(self, k):
        """Returns the value stored under key k.

        Raises KeyNotFoundError if k is not in the tree."""
        x = self.find_node(k)
        if x is None:
            raise KeyNotFoundError(k)
        return x.value

    def get(self, k, default=None):
        x = self.find_node(k)
        return x.value if x is not None else default

    def update(self, x, v):
        """Set the value of the existing node x to v

        Time Complexity: O(1)
        """
        x.value = v

    def _insert_duplicate(self, x, k, v):
        if self.duplicates == DUP_REJECT:
            raise DuplicateKeyError(k)
        log.debug1("key ", repr(k), " already in tree, replacing value")
        self.update(x, v)
        return x

    def insert(self, k, v):
        """Insert key k with value v as a new leaf.

        Smaller keys go left, greater or equal keys go right. An equal key
        is handled according to the tree's duplicate key policy.
        Returns the newly inserted/updated node.
        Time complexity: O(h)"""
        y = self.nil
        x = self.root
        go_left = False
        while x is not self.nil:
            if self.duplicates != DUP_MULTISET and k == x.key:
                return self._insert_duplicate(x, k, v)
            y = x
            go_left = k < x.key
            x = x.left if go_left else x.right

        new = self.node_type(k, v, nil=self.nil, parent=y)
        if y is self.nil:
            self.root = new
        elif go_left:
            y.left = new
        else:
            y.right = new
        self._size += 1
        log.debug3("inserted key ", repr(k))
        return new

    def remove(self, k):
        """Remove the node with key k.

        Raises KeyNotFoundError (leaving the tree untouched) if k is not in
        the tree."""
        x = self.find_node(k)
        if x is None:
            raise KeyNotFoundError(k)
        self.delete(x)
        log.debug3("removed key ", repr(k))

    def delete(self, node):
        """Delete node from the tree.

        A node with two children takes over the key and value of its
        successor, and the successor node is excised instead.
        Time complexity: O(h)"""
        if node.left is not self.nil and node.right is not self.nil:
            successor = self.minimum(node.right)
            node.key = successor.key
            node.value = successor.value
            node = successor

        # node has at most one child now
        if node.left is not self.nil:
            self._replace_with(node, node.left)
        elif node.right is not self.nil:
            self._replace_with(node, node.right)
        else:
            self._replace_with(node, self.nil)
        self._size -= 1

    def _replace_with(self, old, new):
        """Replace node old with the subtree rooted at node new (or nil)

        The root node is never replaced by another object: it copies the
        content of new instead and new is discarded.
        Time complexity: O(1)"""
        if old.parent is not self.nil:
            if old is old.parent.left:
                old.parent.left = new
            else:
                old.parent.right = new
            if new is not self.nil:
                new.parent = old.parent
            self._release(old)
        elif new is not self.nil:
            log.debug2("root takes over content of key ", repr(new.key))
            old.key = new.key
            old.value = new.value
            old.left = new.left
            old.right = new.right
            if old.left is not self.nil:
                old.left.parent = old
            if old.right is not self.nil:
                old.right.parent = old
            self._release(new)
        else:
            self.root = self.nil
            self._release(old)

    def _release(self, x):
        x.left = self.nil
        x.right = self.nil
        x.parent = self.nil

    def minimum(self, x=None):
        """Finds the node with the minimal key

        Returns None if the tree is empty
        Time complexity: O(h)"""
        if x is None:
            x = self.root
        if x is self.nil:
            return None

        while x.left is not self.nil:
            x = x.left
        return x

    def maximum(self, x=None):
        """Finds the node with the maximum key

        Time complexity: O(h)"""
        if x is None:
            x = self.root
        if x is self.nil:
            return None

        while x.right is not self.nil:
            x = x.right
        return x

    def successor(self, x):
        """Finds the successor of node x in sorted order

        Time complexity: O(h)"""
        if x.right is not self.nil:
            return self.minimum(x.right)
        y = x.parent
        while y is not self.nil and x is y.right:
            x = y
            y = y.parent
        return y if y is not self.nil else None

    def predecessor(self, x):
        """Finds the predecessor of node x in sorted order

        Time complexity: O(h)"""
        if x.left is not self.nil:
            return self.maximum(x.left)
        y = x.parent
        while y is not self.nil and x is y.left:
            x = y
            y = y.parent
        return y if y is not self.nil else None

    def inorder(self, f):
        """Does an inorder traversal and calls f(x) for every node x.

        Time complexity: O(n)
        """
        stack = []
        x = self.root
        while stack or x is not self.nil:
            if x is not self.nil:
                stack.append(x)
                x = x.left
            else:
                x = stack.pop()
                f(x)
                x = x.right

    def preorder(self, f):
        """Calls f(x) for every node x, parents before their children."""
        if self.root is self.nil:
            return
        stack = [self.root]
        while stack:
            x = stack.pop()
            f(x)
            if x.right is not self.nil:
                stack.append(x.right)
            if x.left is not self.nil:
                stack.append(x.left)

    def postorder(self, f):
        """Calls f(x) for every node x, children before their parents."""
        if self.root is self.nil:
            return
        # node, right, left reversed is left, right, node
        nodes = []
        stack = [self.root]
        while stack:
            x = stack.pop()
            nodes.append(x)
            if x.left is not self.nil:
                stack.append(x.left)
            if x.right is not self.nil:
                stack.append(x.right)
        for x in reversed(nodes):
            f(x)

    def levelorder(self, f):
        """Calls f(x) for every node x, level by level from left to right."""
        if self.root is self.nil:
            return
        queue = Queue()
        queue.enqueue(self.root)
        x = queue.dequeue()
        while x is not None:
            f(x)
            if x.left is not self.nil:
                queue.enqueue(x.left)
            if x.right is not self.nil:
                queue.enqueue(x.right)
            x = queue.dequeue()

    def _collect(self, walk, attr='value'):
        values = []
        walk(lambda n: values.append(getattr(n, attr)))
        return values

    def dfs_in_order(self):
        """Returns the values in ascending key order."""
        return self._collect(self.inorder)

    def dfs_pre_order(self):
        return self._collect(self.preorder)

    def dfs_post_order(self):
        return self._collect(self.postorder)

    def bfs(self):
        return self._collect(self.levelorder)

    def keys(self):
        return self._collect(self.inorder, 'key')

    def items(self):
        items = []
        self.inorder(lambda n: items.append((n.key, n.value)))
        return items

    def get_height(self):
        """Returns the number of edges on the longest path from the root to
        a leaf. A tree with a single node (or none) has height 0.

        Time complexity: O(n)"""
        if self.root is self.nil:
            return 0
        height = 0
        stack = [(self.root, 0)]
        while stack:
            x, depth = stack.pop()
            if x.left is self.nil and x.right is self.nil:
                height = max(height, depth)
                continue
            if x.left is not self.nil:
                stack.append((x.left, depth + 1))
            if x.right is not self.nil:
                stack.append((x.right, depth + 1))
        return height

    def is_bst(self):
        """Checks that an inorder traversal yields the keys in
        non-decreasing order."""
        keys = self.keys()
        for i in range(1, len(keys)):
            if keys[i] < keys[i-1]:
                return False
        return True

    def find_kth_largest_value(self, k):
        """Returns the value with the k-th largest key (k = 1 is the
        maximum).

        Raises IndexOutOfRangeError if k is not between 1 and the number of
        nodes in the tree.
        Time complexity: O(n)"""
        values = self.dfs_in_order()
        i = len(values) - k
        if k < 1 or i < 0:
            raise IndexOutOfRangeError(k, len(values))
        return values[i]

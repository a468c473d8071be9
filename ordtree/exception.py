
class OrdTreeError(Exception):
    def __str__(self):
        return ''.join(map(str, self.args))

class KeyNotFoundError(OrdTreeError, KeyError):
    def __init__(self, key):
        super(KeyNotFoundError, self).__init__(key)
        self.key = key

    def __str__(self):
        return "key not found: " + repr(self.key)

class DuplicateKeyError(OrdTreeError):
    def __init__(self, key):
        super(DuplicateKeyError, self).__init__(key)
        self.key = key

    def __str__(self):
        return "duplicate key: " + repr(self.key)

class IndexOutOfRangeError(OrdTreeError, IndexError):
    def __init__(self, k, size):
        super(IndexOutOfRangeError, self).__init__(k, size)
        self.k = k
        self.size = size

    def __str__(self):
        return ("rank {0} out of range for tree of size {1}"
                .format(self.k, self.size))

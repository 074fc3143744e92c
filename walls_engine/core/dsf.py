from array import array

class DisjointSet:
    """
    Union-find over a fixed number of elements.
    Parent and rank live in flat arrays; find() flattens paths as it walks.
    """
    __slots__ = ('parent', 'rank')

    def __init__(self, size: int):
        self.parent = array('i', range(size))
        self.rank = array('B', [0] * size)

    def find(self, i: int) -> int:
        parent = self.parent
        root = i
        while parent[root] != root:
            root = parent[root]
        # Path flattening
        while parent[i] != root:
            parent[i], i = root, parent[i]
        return root

    def merge(self, a: int, b: int) -> int:
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return ra
        if self.rank[ra] < self.rank[rb]:
            ra, rb = rb, ra
        self.parent[rb] = ra
        if self.rank[ra] == self.rank[rb]:
            self.rank[ra] += 1
        return ra

    def same(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def __len__(self):
        return len(self.parent)

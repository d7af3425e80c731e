"""
Union-Find (並查集) 資料結構

用於高效處理連通分量問題
"""


class UnionFind:
    """
    靜態 Union-Find 資料結構

    用於固定大小的元素集合，支援路徑壓縮和按大小合併，
    並追蹤目前剩餘的集合數量
    """

    def __init__(self, size: int) -> None:
        """
        初始化 Union-Find

        Args:
            size: 元素數量 (0..size-1)
        """
        if size < 0:
            raise ValueError(f"元素數量不可為負數: {size}")
        self._parent = list(range(size))
        self._size = [1] * size
        self._count = size

    def __len__(self) -> int:
        return len(self._parent)

    @property
    def component_count(self) -> int:
        """目前的集合數量"""
        return self._count

    def find(self, x: int) -> int:
        """
        尋找元素的根節點 (帶路徑壓縮)

        Args:
            x: 元素索引

        Returns:
            根節點索引
        """
        parent = self._parent
        if not 0 <= x < len(parent):
            raise IndexError(f"元素索引 {x} 超出範圍 [0, {len(parent)})")
        while parent[x] != x:
            parent[x] = parent[parent[x]]  # 路徑壓縮
            x = parent[x]
        return x

    def union(self, a: int, b: int) -> bool:
        """
        合併兩個元素所在的集合

        Args:
            a: 第一個元素索引
            b: 第二個元素索引

        Returns:
            是否真的發生合併 (已在同一集合時為 False)
        """
        pa = self.find(a)
        pb = self.find(b)
        if pa == pb:
            return False

        size = self._size
        # 按大小合併：將較小的樹連接到較大的樹
        if size[pa] < size[pb]:
            pa, pb = pb, pa

        self._parent[pb] = pa
        size[pa] += size[pb]
        self._count -= 1
        return True

    def connected(self, a: int, b: int) -> bool:
        """兩個元素是否在同一集合"""
        return self.find(a) == self.find(b)

"""
區域建構模組

掃描網格並合併相鄰的同狀態像素 (4-連通)
"""

import logging

from .geometry import Coordinate
from .grid import PixelGrid
from .union_find import UnionFind


logger = logging.getLogger(__name__)


def connect(grid: PixelGrid, uf: UnionFind, a: Coordinate, b: Coordinate) -> bool:
    """
    若兩個相鄰像素狀態相同且尚未連通，則合併它們

    Args:
        grid: 像素網格
        uf: Union-Find
        a: 第一個像素
        b: 第二個像素 (假設與 a 相鄰)

    Returns:
        是否發生合併
    """
    indexer = grid.indexer
    id_a = indexer.to_id(a.x, a.y)
    id_b = indexer.to_id(b.x, b.y)

    if grid.is_on(a.x, a.y) != grid.is_on(b.x, b.y):
        return False
    if uf.find(id_a) == uf.find(id_b):
        return False
    return uf.union(id_a, id_b)


def build_regions(grid: PixelGrid, uf: UnionFind | None = None) -> UnionFind:
    """
    將網格分解為最大的同狀態連通區域

    每個像素只檢查右方與下方鄰居，因此每條邊恰好被檢查一次

    Args:
        grid: 像素網格
        uf: 既有的 Union-Find (重複執行是安全的)，若為 None 則建立新的

    Returns:
        合併完成的 Union-Find
    """
    indexer = grid.indexer
    if uf is None:
        uf = UnionFind(indexer.size)
    elif len(uf) != indexer.size:
        raise ValueError(f"Union-Find 大小 {len(uf)} 與網格像素數 {indexer.size} 不符")

    for x in range(grid.width):
        for y in range(grid.height):
            here = Coordinate(x, y)
            for neighbor in indexer.forward_neighbors(x, y):
                connect(grid, uf, here, neighbor)

    logger.info(f"分解出 {uf.component_count} 個連通分量 ({grid.width}x{grid.height})")
    return uf

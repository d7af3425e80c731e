"""
分量標籤繪製模組

為每個連通分量指定一個顏色並輸出標籤圖
"""

from typing import Final

import numpy as np
from PIL import Image

from maze_tools.common.color_filter import RGB

from .grid import PixelGrid
from .union_find import UnionFind


# 常數定義
MAX_COLOR: Final[int] = 0xFFFFFF
FIRST_COMPONENT_COLOR: Final[RGB] = (0, 0, 100)


def build_palette(
    count: int,
    rng: np.random.Generator,
    first_color: RGB = FIRST_COMPONENT_COLOR,
) -> np.ndarray:
    """
    建立調色盤

    第 0 個 (依發現順序) 分量使用固定顏色，其餘為隨機 24-bit 顏色

    Args:
        count: 分量數量
        rng: 亂數產生器
        first_color: 第一個分量的顏色

    Returns:
        調色盤 (count, 3), uint8
    """
    palette = np.zeros((count, 3), dtype=np.uint8)
    if count == 0:
        return palette

    palette[0] = first_color
    packed = rng.integers(0, MAX_COLOR, size=count - 1, endpoint=True)
    palette[1:, 0] = (packed >> 16) & 0xFF
    palette[1:, 1] = (packed >> 8) & 0xFF
    palette[1:, 2] = packed & 0xFF
    return palette


class LabelRenderer:
    """
    標籤繪製器

    依掃描順序 (x 外層、y 內層) 發現分量，第一次遇到的代表 ID 取得下一個顏色。
    每次繪製都重新抽取調色盤，同一分量在兩次繪製間不保證同色
    """

    def __init__(
        self,
        rng: np.random.Generator | int | None = None,
        first_color: RGB = FIRST_COMPONENT_COLOR,
    ) -> None:
        """
        初始化標籤繪製器

        Args:
            rng: 亂數產生器或種子，若為 None 則使用未指定種子的產生器
            first_color: 第一個分量的顏色
        """
        self._rng = rng if isinstance(rng, np.random.Generator) else np.random.default_rng(rng)
        self.first_color = first_color

    def label_map(self, grid: PixelGrid, uf: UnionFind) -> np.ndarray:
        """
        計算每個像素的分量標籤 (依發現順序編號)

        Args:
            grid: 像素網格
            uf: 合併完成的 Union-Find

        Returns:
            標籤陣列 (H, W), int
        """
        indexer = grid.indexer
        labels = np.empty((grid.height, grid.width), dtype=np.int64)
        seen: dict[int, int] = {}

        for x in range(grid.width):
            for y in range(grid.height):
                root = uf.find(indexer.to_id(x, y))
                label = seen.get(root)
                if label is None:
                    label = seen[root] = len(seen)
                labels[y, x] = label

        return labels

    def render(self, grid: PixelGrid, uf: UnionFind) -> np.ndarray:
        """
        繪製標籤圖

        Returns:
            RGB 陣列 (H, W, 3), uint8
        """
        palette = build_palette(uf.component_count, self._rng, self.first_color)
        return palette[self.label_map(grid, uf)]

    def render_image(self, grid: PixelGrid, uf: UnionFind) -> Image.Image:
        """繪製標籤圖並轉為 PIL 圖片"""
        return Image.fromarray(self.render(grid, uf))

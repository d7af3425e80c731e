"""
迷宮連通性模組

將圖片分解為連通分量，並回答起點與終點是否連通
"""

import logging
from pathlib import Path

import numpy as np
from PIL import Image

from maze_tools.common.color_filter import RGB, MarkerFilterConfig

from .builder import build_regions
from .geometry import Coordinate
from .grid import DEFAULT_ON_THRESHOLD, PixelGrid
from .locator import EndpointResult, LocatedPoint, highlight_endpoints, locate_endpoints
from .renderer import FIRST_COMPONENT_COLOR, LabelRenderer


logger = logging.getLogger(__name__)


DEFAULT_HIGHLIGHT_COLOR: RGB = (0, 0, 0)


class Maze:
    """
    迷宮

    建構時依序：定位端點、標示端點、分解連通分量。
    建構完成後 are_connected/has_solution 即可回答正確結果
    """

    def __init__(
        self,
        grid: PixelGrid,
        *,
        marker_filter: MarkerFilterConfig | None = None,
        highlight_color: RGB = DEFAULT_HIGHLIGHT_COLOR,
        strict_markers: bool = False,
    ) -> None:
        """
        初始化迷宮

        Args:
            grid: 像素網格 (端點會被塗上標示顏色)
            marker_filter: 標記過濾設定，若為 None 則使用預設 (紅色)
            highlight_color: 端點標示顏色
            strict_markers: 標記少於兩個時是否拋出錯誤

        Raises:
            MarkerNotFoundError: strict_markers 為 True 且標記不足時
        """
        self.grid = grid
        self.marker_filter = MarkerFilterConfig() if marker_filter is None else marker_filter

        endpoints = locate_endpoints(grid, self.marker_filter)
        if strict_markers:
            endpoints.require_both()
        self.endpoints: EndpointResult = endpoints
        highlight_endpoints(grid, endpoints, highlight_color)

        self._uf = build_regions(grid)
        logger.debug(f"起點 {endpoints.start.point}，終點 {endpoints.end.point}")

    @classmethod
    def from_path(
        cls,
        path: Path | str,
        *,
        on_threshold: int = DEFAULT_ON_THRESHOLD,
        marker_filter: MarkerFilterConfig | None = None,
        highlight_color: RGB = DEFAULT_HIGHLIGHT_COLOR,
        strict_markers: bool = False,
    ) -> "Maze":
        """從圖片檔案建立迷宮"""
        grid = PixelGrid.from_path(path, on_threshold=on_threshold)
        return cls(
            grid,
            marker_filter=marker_filter,
            highlight_color=highlight_color,
            strict_markers=strict_markers,
        )

    @property
    def start(self) -> LocatedPoint:
        return self.endpoints.start

    @property
    def end(self) -> LocatedPoint:
        return self.endpoints.end

    @property
    def component_count(self) -> int:
        """連通分量數量"""
        return self._uf.component_count

    def are_connected(self, x1: int, y1: int, x2: int, y2: int) -> bool:
        """
        兩個像素是否屬於同一連通分量

        Raises:
            CoordinateError: 座標超出範圍時
        """
        indexer = self.grid.indexer
        return self._uf.connected(indexer.to_id(x1, y1), indexer.to_id(x2, y2))

    def are_coordinates_connected(self, a: Coordinate, b: Coordinate) -> bool:
        return self.are_connected(a.x, a.y, b.x, b.y)

    def has_solution(self) -> bool:
        """
        迷宮是否有解 (起點與終點在同一連通分量)

        缺少的端點以 (0, 0) 代替，可用 endpoints.both_found 區分
        """
        return self.are_coordinates_connected(self.start.point, self.end.point)

    def label_map(self) -> np.ndarray:
        """每個像素的分量標籤 (依發現順序編號)"""
        return LabelRenderer().label_map(self.grid, self._uf)

    def component_image(
        self,
        rng: np.random.Generator | int | None = None,
        first_color: RGB = FIRST_COMPONENT_COLOR,
    ) -> Image.Image:
        """
        產生連通分量的視覺化圖片

        Args:
            rng: 亂數產生器或種子
            first_color: 第一個分量的顏色

        Returns:
            每個分量塗上不同顏色的圖片
        """
        renderer = LabelRenderer(rng, first_color=first_color)
        return renderer.render_image(self.grid, self._uf)

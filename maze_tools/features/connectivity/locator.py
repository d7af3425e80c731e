"""
端點定位模組

掃描網格找出起點與終點標記像素
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

from maze_tools.common.color_filter import RGB, MarkerFilterConfig
from maze_tools.common.errors import MarkerNotFoundError

from .geometry import ORIGIN, Coordinate
from .grid import PixelGrid


logger = logging.getLogger(__name__)


MarkerPredicate = Callable[[RGB], bool]


@dataclass(frozen=True, slots=True)
class LocatedPoint:
    """
    定位結果

    找不到標記時 point 保持為 (0, 0)，必須以 found 判斷

    Attributes:
        found: 是否找到標記
        point: 標記座標
    """

    found: bool = False
    point: Coordinate = ORIGIN


@dataclass(frozen=True, slots=True)
class EndpointResult:
    """
    起點/終點定位結果

    Attributes:
        start: 第一個找到的標記
        end: 第二個找到的標記
        marker_count: 網格中標記像素的總數
    """

    start: LocatedPoint
    end: LocatedPoint
    marker_count: int

    @property
    def both_found(self) -> bool:
        return self.start.found and self.end.found

    def require_both(self) -> "EndpointResult":
        """
        確認起點與終點都已找到

        Raises:
            MarkerNotFoundError: 標記少於兩個時
        """
        if not self.both_found:
            raise MarkerNotFoundError(f"需要兩個標記像素，只找到 {self.marker_count} 個")
        return self


def locate_endpoints(
    grid: PixelGrid, is_marker: MarkerFilterConfig | MarkerPredicate
) -> EndpointResult:
    """
    掃描網格 (x 外層、y 內層) 找出前兩個標記像素

    Args:
        grid: 像素網格
        is_marker: 標記過濾設定，或接收 RGB 的判斷函數

    Returns:
        定位結果
    """
    markers = _marker_coordinates(grid, is_marker)
    count = len(markers)
    for point in markers:
        logger.debug("標記像素 %s", point)
    found = markers[:2]

    start = LocatedPoint(True, found[0]) if found else LocatedPoint()
    end = LocatedPoint(True, found[1]) if len(found) > 1 else LocatedPoint()

    if count < 2:
        logger.warning(f"只找到 {count} 個標記像素，缺少的端點預設為 {ORIGIN}")
    elif count > 2:
        logger.warning(f"找到 {count} 個標記像素，只使用前兩個")

    return EndpointResult(start=start, end=end, marker_count=count)


def _marker_coordinates(
    grid: PixelGrid, is_marker: MarkerFilterConfig | MarkerPredicate
) -> list[Coordinate]:
    """依掃描順序列出所有標記像素，MarkerFilterConfig 走向量化遮罩"""
    if isinstance(is_marker, MarkerFilterConfig):
        # 轉置後 argwhere 依 (x, y) 字典序輸出，即 x 外層、y 內層
        mask = is_marker.mask(grid.pixels)
        return [Coordinate(int(x), int(y)) for x, y in np.argwhere(mask.T)]

    return [
        Coordinate(x, y)
        for x in range(grid.width)
        for y in range(grid.height)
        if is_marker(grid.color(x, y))
    ]


def highlight_endpoints(grid: PixelGrid, result: EndpointResult, color: RGB) -> None:
    """將找到的端點塗上標示顏色 (不改變像素狀態)"""
    for located in (result.start, result.end):
        if located.found:
            grid.set_color(located.point.x, located.point.y, color)

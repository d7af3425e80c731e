"""
幾何工具模組

提供網格座標與像素 ID 之間的雙向轉換
"""

from collections.abc import Iterator
from dataclasses import dataclass

from maze_tools.common.errors import CoordinateError


@dataclass(frozen=True, slots=True)
class Coordinate:
    """
    網格座標

    Attributes:
        x: 欄 (0 <= x < width)
        y: 列 (0 <= y < height)
    """

    x: int
    y: int

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


ORIGIN = Coordinate(0, 0)


@dataclass(frozen=True, slots=True)
class GridIndexer:
    """
    座標索引器

    將 width x height 網格中的 (x, y) 映射到 [0, width*height) 的整數 ID，
    ID = y * width + x，並可反向轉換

    Attributes:
        width: 網格寬度
        height: 網格高度
    """

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"無效的網格尺寸: {self.width}x{self.height}")

    @property
    def size(self) -> int:
        """像素總數"""
        return self.width * self.height

    def contains(self, x: int, y: int) -> bool:
        """座標是否在網格內"""
        return 0 <= x < self.width and 0 <= y < self.height

    def to_id(self, x: int, y: int) -> int:
        """
        座標轉為像素 ID

        Args:
            x: 欄
            y: 列

        Returns:
            像素 ID

        Raises:
            CoordinateError: 座標超出範圍時
        """
        if not self.contains(x, y):
            raise CoordinateError(
                f"座標 ({x},{y}) 超出 {self.width}x{self.height} 網格範圍"
            )
        return y * self.width + x

    def to_coordinate(self, pixel_id: int) -> Coordinate:
        """
        像素 ID 轉回座標

        Args:
            pixel_id: 像素 ID

        Returns:
            對應的座標

        Raises:
            CoordinateError: ID 超出範圍時
        """
        if not 0 <= pixel_id < self.size:
            raise CoordinateError(f"像素 ID {pixel_id} 超出範圍 [0, {self.size})")
        y, x = divmod(pixel_id, self.width)
        return Coordinate(x, y)

    def forward_neighbors(self, x: int, y: int) -> Iterator[Coordinate]:
        """
        產生右方與下方的鄰居 (僅限網格內)

        每條 4-連通邊只會從左/上端點被列舉一次
        """
        if x + 1 < self.width:
            yield Coordinate(x + 1, y)
        if y + 1 < self.height:
            yield Coordinate(x, y + 1)

"""
像素網格模組

包裝來源圖片，提供像素的開/關分類與顯示用的可變像素緩衝區
"""

import logging
from pathlib import Path
from typing import Final

import numpy as np
from PIL import Image, UnidentifiedImageError

from maze_tools.common.color_filter import RGB
from maze_tools.common.errors import CoordinateError, ImageLoadError

from .geometry import GridIndexer


logger = logging.getLogger(__name__)


# 常數定義
DEFAULT_ON_THRESHOLD: Final[int] = 128
ON_COLOR: Final[RGB] = (255, 255, 255)


class PixelGrid:
    """
    像素網格

    建構時從像素計算一次開/關狀態 (HSV 明度 >= 閾值 即為開) 並凍結，
    之後 set_color 只修改顯示用的像素，不影響狀態

    Attributes:
        indexer: 座標索引器
    """

    def __init__(
        self, pixels: np.ndarray, *, on_threshold: int = DEFAULT_ON_THRESHOLD
    ) -> None:
        """
        初始化像素網格

        Args:
            pixels: RGB 陣列 (H, W, 3), uint8
            on_threshold: 開狀態的明度閾值 (0-255)
        """
        if pixels.ndim != 3 or pixels.shape[2] != 3:
            raise ValueError(f"像素陣列必須為 (H, W, 3)，收到 {pixels.shape}")
        if not 0 <= on_threshold <= 255:
            raise ValueError("明度閾值必須在 [0, 255] 範圍內")

        height, width = pixels.shape[:2]
        self.indexer = GridIndexer(width=width, height=height)
        self._pixels = np.array(pixels, dtype=np.uint8, copy=True)

        states = self._pixels.max(axis=2) >= on_threshold
        states.setflags(write=False)
        self._states = states

    @classmethod
    def from_image(
        cls, image: Image.Image, *, on_threshold: int = DEFAULT_ON_THRESHOLD
    ) -> "PixelGrid":
        """從 PIL 圖片建立網格"""
        if image.width <= 0 or image.height <= 0:
            raise ImageLoadError("無效的圖片尺寸")
        return cls(np.asarray(image.convert("RGB")), on_threshold=on_threshold)

    @classmethod
    def from_path(
        cls, path: Path | str, *, on_threshold: int = DEFAULT_ON_THRESHOLD
    ) -> "PixelGrid":
        """
        從圖片檔案建立網格

        Args:
            path: 圖片路徑
            on_threshold: 開狀態的明度閾值

        Returns:
            像素網格

        Raises:
            ImageLoadError: 無法開啟或解碼圖片時
        """
        try:
            with Image.open(path) as image:
                image.load()
                grid = cls.from_image(image, on_threshold=on_threshold)
        except (OSError, UnidentifiedImageError) as e:
            raise ImageLoadError(f"無法開啟圖片: {path}") from e

        logger.debug("已載入 %s (%dx%d)", path, grid.width, grid.height)
        return grid

    @classmethod
    def from_states(cls, states: np.ndarray | list[list[bool]]) -> "PixelGrid":
        """
        從布林狀態陣列建立網格 (開=白，關=黑)

        Args:
            states: 狀態陣列 (H, W)，以 states[y][x] 索引
        """
        mask = np.asarray(states, dtype=bool)
        if mask.ndim != 2:
            raise ValueError(f"狀態陣列必須為 (H, W)，收到 {mask.shape}")
        pixels = np.zeros((*mask.shape, 3), dtype=np.uint8)
        pixels[mask] = ON_COLOR
        return cls(pixels)

    @property
    def width(self) -> int:
        return self.indexer.width

    @property
    def height(self) -> int:
        return self.indexer.height

    @property
    def states(self) -> np.ndarray:
        """唯讀的狀態陣列 (H, W)"""
        return self._states

    @property
    def pixels(self) -> np.ndarray:
        """目前的像素 (含標示顏色) 的副本"""
        return self._pixels.copy()

    def _check(self, x: int, y: int) -> None:
        if not self.indexer.contains(x, y):
            raise CoordinateError(
                f"座標 ({x},{y}) 超出 {self.width}x{self.height} 網格範圍"
            )

    def is_on(self, x: int, y: int) -> bool:
        """像素是否為開狀態"""
        self._check(x, y)
        return bool(self._states[y, x])

    def color(self, x: int, y: int) -> RGB:
        """取得像素目前的顏色"""
        self._check(x, y)
        r, g, b = self._pixels[y, x]
        return int(r), int(g), int(b)

    def set_color(self, x: int, y: int, rgb: RGB) -> None:
        """設定像素的顯示顏色 (不改變開/關狀態)"""
        self._check(x, y)
        self._pixels[y, x] = rgb

"""
共用模組

提供在多個功能間共用的錯誤與顏色定義
"""

from .color_filter import MARKER_PRESETS, RGB, MarkerColor, MarkerFilterConfig
from .errors import CoordinateError, ImageLoadError, MarkerNotFoundError, MazeError


__all__ = [
    "RGB",
    "MARKER_PRESETS",
    "MarkerColor",
    "MarkerFilterConfig",
    "MazeError",
    "ImageLoadError",
    "CoordinateError",
    "MarkerNotFoundError",
]

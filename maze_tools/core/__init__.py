"""
核心模組 - 求解流程與進度顯示
"""

from .processor import MazeProcessor
from .progress import RichProgressBar


__all__ = ["MazeProcessor", "RichProgressBar"]

"""
迷宮連通分量工具

將迷宮圖片分解為同狀態的 4-連通分量，判斷起點與終點是否連通，
並輸出每個分量一種顏色的標籤圖
"""

from maze_tools.features.connectivity import Maze, PixelGrid


__all__ = ["Maze", "PixelGrid"]

"""
連通分量功能模組

將二值化圖片分解為 4-連通分量，並回答像素間的連通性
"""

from .builder import build_regions, connect
from .geometry import ORIGIN, Coordinate, GridIndexer
from .grid import PixelGrid
from .locator import EndpointResult, LocatedPoint, highlight_endpoints, locate_endpoints
from .maze import Maze
from .renderer import LabelRenderer, build_palette
from .union_find import UnionFind


__all__ = [
    "Coordinate",
    "EndpointResult",
    "GridIndexer",
    "LabelRenderer",
    "LocatedPoint",
    "Maze",
    "ORIGIN",
    "PixelGrid",
    "UnionFind",
    "build_palette",
    "build_regions",
    "connect",
    "highlight_endpoints",
    "locate_endpoints",
]

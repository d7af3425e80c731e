"""
Pytest 配置和共用 fixtures
"""

from collections import deque
from collections.abc import Callable
from pathlib import Path

import numpy as np
import pytest
from PIL import Image, ImageDraw


WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)

ReferenceLabels = Callable[[np.ndarray], tuple[np.ndarray, int]]


def flood_fill_labels(states: np.ndarray) -> tuple[np.ndarray, int]:
    """以 BFS 計算 4-連通同狀態分量 (作為獨立的對照實作)"""
    height, width = states.shape
    labels = np.full((height, width), -1, dtype=np.int64)
    count = 0

    for sy in range(height):
        for sx in range(width):
            if labels[sy, sx] != -1:
                continue
            labels[sy, sx] = count
            queue = deque([(sx, sy)])
            while queue:
                x, y = queue.popleft()
                for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
                    if not (0 <= nx < width and 0 <= ny < height):
                        continue
                    if labels[ny, nx] != -1 or states[ny, nx] != states[y, x]:
                        continue
                    labels[ny, nx] = count
                    queue.append((nx, ny))
            count += 1

    return labels, count


@pytest.fixture
def reference_labels() -> ReferenceLabels:
    """BFS 對照實作"""
    return flood_fill_labels


@pytest.fixture
def random_states() -> Callable[[int, int, int], np.ndarray]:
    """產生可重現的隨機狀態網格"""

    def _make(width: int, height: int, seed: int) -> np.ndarray:
        rng = np.random.default_rng(seed)
        return rng.random((height, width)) < 0.5

    return _make


def _draw_maze(path: Path, *, wall_bottom: int) -> Path:
    """
    繪製 20x20 的白底迷宮，x=10 有一道黑牆 (y=0..wall_bottom)，
    紅色標記位於 (2,2) 與 (17,2)
    """
    img = Image.new("RGB", (20, 20), color=WHITE)
    draw = ImageDraw.Draw(img)
    draw.rectangle([(10, 0), (10, wall_bottom)], fill=BLACK)
    img.putpixel((2, 2), RED)
    img.putpixel((17, 2), RED)
    img.save(path)
    return path


@pytest.fixture
def solvable_maze(tmp_path: Path) -> Path:
    """
    牆的下方留有缺口的迷宮

    分量: 白色通道 + 黑牆 = 2，有解
    """
    return _draw_maze(tmp_path / "solvable.png", wall_bottom=14)


@pytest.fixture
def unsolvable_maze(tmp_path: Path) -> Path:
    """
    牆貫穿整張圖的迷宮

    分量: 左通道 + 黑牆 + 右通道 = 3，無解
    """
    return _draw_maze(tmp_path / "unsolvable.png", wall_bottom=19)


@pytest.fixture
def single_marker_maze(tmp_path: Path) -> Path:
    """只有一個標記像素的迷宮"""
    path = tmp_path / "single_marker.png"
    img = Image.new("RGB", (5, 5), color=WHITE)
    img.putpixel((3, 1), RED)
    img.save(path)
    return path


@pytest.fixture
def corrupt_image(tmp_path: Path) -> Path:
    """無法解碼的圖片檔案"""
    path = tmp_path / "corrupt.png"
    path.write_bytes(b"not an image")
    return path


@pytest.fixture
def maze_folder(tmp_path: Path) -> Path:
    """包含兩張迷宮、一張壞圖和一個非圖片檔案的資料夾"""
    folder = tmp_path / "mazes"
    folder.mkdir()
    _draw_maze(folder / "a_solvable.png", wall_bottom=14)
    _draw_maze(folder / "b_unsolvable.png", wall_bottom=19)
    (folder / "c_corrupt.png").write_bytes(b"not an image")
    (folder / "notes.txt").write_text("ignored")
    return folder

"""
迷宮連通性測試
"""

from pathlib import Path

import numpy as np
import pytest

from maze_tools.common.color_filter import MarkerFilterConfig
from maze_tools.common.errors import CoordinateError, MarkerNotFoundError
from maze_tools.features.connectivity import Coordinate, Maze, PixelGrid


WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)


def _grid(rows: list[list[tuple[int, int, int]]]) -> PixelGrid:
    return PixelGrid(np.array(rows, dtype=np.uint8))


@pytest.fixture
def ring_maze() -> Maze:
    """3x3，中心為關，標記在 (0,0) 與 (2,2)"""
    return Maze(
        _grid(
            [
                [RED, WHITE, WHITE],
                [WHITE, BLACK, WHITE],
                [WHITE, WHITE, RED],
            ]
        )
    )


class TestScenarios:
    """測試典型情境"""

    @pytest.mark.unit
    def test_ring_around_center(self, ring_maze: Maze) -> None:
        assert ring_maze.are_connected(0, 0, 2, 2) is True
        assert ring_maze.component_count == 2
        assert ring_maze.has_solution() is True
        assert ring_maze.are_connected(1, 1, 0, 0) is False

    @pytest.mark.unit
    def test_two_markers_side_by_side(self) -> None:
        maze = Maze(_grid([[RED, RED]]))
        assert maze.start.point == Coordinate(0, 0)
        assert maze.end.point == Coordinate(1, 0)
        assert maze.are_connected(0, 0, 1, 0) is True
        assert maze.component_count == 1
        assert maze.has_solution() is True

    @pytest.mark.unit
    def test_single_marker_end_defaults_to_origin(self) -> None:
        """標記不足時終點為 (0,0)，has_solution 以該預設點計算"""
        maze = Maze(
            _grid(
                [
                    [WHITE, BLACK, WHITE],
                    [WHITE, BLACK, RED],
                ]
            )
        )
        assert maze.start.point == Coordinate(2, 1)
        assert maze.end.found is False
        assert maze.end.point == Coordinate(0, 0)
        assert maze.endpoints.both_found is False
        assert maze.has_solution() is False

    @pytest.mark.unit
    def test_strict_markers(self) -> None:
        with pytest.raises(MarkerNotFoundError):
            Maze(_grid([[RED, WHITE]]), strict_markers=True)

    @pytest.mark.unit
    def test_wall_blocks_path(self) -> None:
        maze = Maze(
            _grid(
                [
                    [RED, BLACK, WHITE],
                    [WHITE, BLACK, RED],
                ]
            )
        )
        assert maze.has_solution() is False
        assert maze.component_count == 3


class TestQueries:
    """測試查詢介面"""

    @pytest.mark.unit
    def test_self_connected(self, ring_maze: Maze) -> None:
        for x in range(3):
            for y in range(3):
                assert ring_maze.are_connected(x, y, x, y)

    @pytest.mark.unit
    def test_out_of_range(self, ring_maze: Maze) -> None:
        with pytest.raises(CoordinateError):
            ring_maze.are_connected(0, 0, 3, 0)

    @pytest.mark.unit
    def test_coordinates_overload(self, ring_maze: Maze) -> None:
        assert ring_maze.are_coordinates_connected(Coordinate(0, 1), Coordinate(2, 1))

    @pytest.mark.unit
    def test_highlight_applied(self, ring_maze: Maze) -> None:
        assert ring_maze.grid.color(0, 0) == BLACK
        assert ring_maze.grid.color(2, 2) == BLACK
        assert ring_maze.grid.is_on(0, 0) is True

    @pytest.mark.unit
    def test_custom_marker_and_highlight(self) -> None:
        green = (0, 255, 0)
        maze = Maze(
            _grid([[green, WHITE, green]]),
            marker_filter=MarkerFilterConfig.from_preset("green"),
            highlight_color=(9, 9, 9),
        )
        assert maze.endpoints.both_found
        assert maze.grid.color(2, 0) == (9, 9, 9)
        assert maze.has_solution()


class TestComponentImage:
    """測試分量圖"""

    @pytest.mark.unit
    def test_component_image(self, ring_maze: Maze) -> None:
        image = ring_maze.component_image(5)
        assert image.size == (3, 3)
        assert image.getpixel((0, 0)) == (0, 0, 100)
        ring = {image.getpixel((x, y)) for x in range(3) for y in range(3) if (x, y) != (1, 1)}
        assert ring == {(0, 0, 100)}
        assert image.getpixel((1, 1)) != (0, 0, 100)

    @pytest.mark.unit
    def test_label_map(self, ring_maze: Maze) -> None:
        labels = ring_maze.label_map()
        assert labels[1, 1] == 1
        assert (labels == 0).sum() == 8


class TestFromPath:
    """測試從檔案建立"""

    @pytest.mark.integration
    def test_solvable(self, solvable_maze: Path) -> None:
        maze = Maze.from_path(solvable_maze)
        assert maze.start.point == Coordinate(2, 2)
        assert maze.end.point == Coordinate(17, 2)
        assert maze.has_solution() is True
        assert maze.component_count == 2

    @pytest.mark.integration
    def test_unsolvable(self, unsolvable_maze: Path) -> None:
        maze = Maze.from_path(unsolvable_maze)
        assert maze.has_solution() is False
        assert maze.component_count == 3

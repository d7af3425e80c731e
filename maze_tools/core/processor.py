"""
迷宮處理器模組

負責單張圖片與資料夾的求解流程：載入、分解、輸出標籤圖
"""

import logging
from pathlib import Path

import numpy as np
from PIL import Image

from maze_tools.common.errors import ImageLoadError, MazeError
from maze_tools.data_model import (
    BatchResult,
    EndpointInfo,
    MazeReport,
    SolveConfig,
    is_supported_image,
)
from maze_tools.features.connectivity import LocatedPoint, Maze, PixelGrid

from .progress import RichProgressBar


logger = logging.getLogger(__name__)


class MazeProcessor:
    """
    迷宮處理器

    依 SolveConfig 建立 Maze、產生報告並儲存分量標籤圖。
    同一處理器內的調色盤亂數產生器共用，設定 seed 時整個批次可重現
    """

    def __init__(self, config: SolveConfig | None = None, *, show_progress: bool = True):
        """
        初始化處理器

        Args:
            config: 求解設定，若為 None 則使用預設設定
            show_progress: 批次處理時是否顯示進度條
        """
        self.config = config or SolveConfig()
        self._show_progress = show_progress
        self._rng = np.random.default_rng(self.config.seed)

    def scan_images(self, folder: Path) -> list[Path]:
        """
        掃描資料夾中的圖片檔案

        Args:
            folder: 資料夾路徑

        Returns:
            圖片檔案路徑列表
        """
        return [f for f in sorted(folder.iterdir()) if is_supported_image(f)]

    def load(self, input_path: Path) -> Maze:
        """
        載入圖片並建立迷宮

        Raises:
            ImageLoadError: 圖片無法載入或超過尺寸上限時
            MarkerNotFoundError: strict_markers 啟用且標記不足時
        """
        grid = PixelGrid.from_path(input_path, on_threshold=self.config.on_threshold)

        limit = self.config.max_image_size
        if max(grid.width, grid.height) > limit:
            raise ImageLoadError(
                f"圖片過大: {input_path} ({grid.width}x{grid.height})，上限 {limit}px"
            )

        return Maze(
            grid,
            marker_filter=self.config.marker_filter,
            highlight_color=self.config.highlight_color,
            strict_markers=self.config.strict_markers,
        )

    def render(self, maze: Maze) -> Image.Image:
        """產生分量標籤圖"""
        return maze.component_image(
            self._rng, first_color=self.config.first_component_color
        )

    def process_file(
        self, input_path: Path, output_path: Path | None = None
    ) -> tuple[MazeReport, Image.Image]:
        """
        處理單張圖片

        Args:
            input_path: 輸入圖片路徑
            output_path: 標籤圖輸出路徑，若為 None 則不儲存

        Returns:
            (求解結果, 標籤圖)
        """
        maze = self.load(input_path)
        image = self.render(maze)

        if output_path is not None:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            image.save(output_path)
            logger.info(f"已儲存: {output_path}")

        return self.build_report(maze, input_path, output_path), image

    def process_folder(
        self, input_folder: Path, output_folder: Path | None = None
    ) -> BatchResult:
        """
        處理資料夾中的所有圖片

        單張失敗 (載入、求解或儲存) 不會中斷批次，失敗原因寫入日誌

        Args:
            input_folder: 輸入資料夾
            output_folder: 輸出資料夾，若為 None 則使用 input_folder/output

        Returns:
            批次處理結果
        """
        output_folder = output_folder or input_folder / "output"
        output_folder.mkdir(parents=True, exist_ok=True)

        image_files = self.scan_images(input_folder)
        total = len(image_files)
        reports: list[MazeReport] = []

        with RichProgressBar(total=total, disable=not self._show_progress) as bar:
            for image_path in image_files:
                output_path = output_folder / f"{image_path.stem}_components.png"
                try:
                    report, _ = self.process_file(image_path, output_path)
                except MazeError as e:
                    logger.error(f"處理失敗 {image_path.name}: {e}")
                    bar.update(image_path.name, success=False)
                    continue
                except Exception:
                    logger.exception("處理時發生錯誤: %s", image_path.name)
                    bar.update(image_path.name, success=False)
                    continue

                reports.append(report)
                detail = "有解" if report.has_solution else "無解"
                bar.update(image_path.name, success=True, detail=detail)

        return BatchResult(
            total=total,
            success=bar.success_count,
            failed=bar.failed_count,
            output_folder=output_folder,
            reports=tuple(reports),
        )

    @staticmethod
    def build_report(
        maze: Maze, source: Path, output_path: Path | None = None
    ) -> MazeReport:
        """由迷宮建立求解報告"""
        return MazeReport(
            source=source,
            width=maze.grid.width,
            height=maze.grid.height,
            has_solution=maze.has_solution(),
            component_count=maze.component_count,
            start=_endpoint_info(maze.start),
            end=_endpoint_info(maze.end),
            output_path=output_path,
        )


def _endpoint_info(located: LocatedPoint) -> EndpointInfo:
    return EndpointInfo(found=located.found, x=located.point.x, y=located.point.y)

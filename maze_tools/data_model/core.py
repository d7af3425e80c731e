"""
核心資料模型

使用 Pydantic 進行資料驗證和序列化，確保資料完整性
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from maze_tools.common.color_filter import RGB, MarkerFilterConfig


class SolveConfig(BaseModel):
    """
    求解設定

    Attributes:
        on_threshold: 開狀態的明度閾值
        marker_filter: 標記過濾設定
        highlight_color: 端點標示顏色
        first_component_color: 第一個分量的顏色
        seed: 調色盤亂數種子
        strict_markers: 標記不足時是否視為錯誤
        max_image_size: 最大邊長（像素）
    """

    model_config = ConfigDict(frozen=True)

    on_threshold: int = Field(default=128, ge=0, le=255)
    marker_filter: MarkerFilterConfig = Field(default_factory=MarkerFilterConfig)
    highlight_color: RGB = (0, 0, 0)
    first_component_color: RGB = (0, 0, 100)
    seed: int | None = None
    strict_markers: bool = False
    max_image_size: int = Field(default=4096, gt=0)


class EndpointInfo(BaseModel):
    """
    端點資訊

    Attributes:
        found: 是否找到標記
        x: 欄
        y: 列
    """

    model_config = ConfigDict(frozen=True)

    found: bool
    x: int = Field(ge=0)
    y: int = Field(ge=0)


class MazeReport(BaseModel):
    """
    單張迷宮的求解結果

    Attributes:
        source: 來源圖片路徑
        width: 圖片寬度
        height: 圖片高度
        has_solution: 起點與終點是否連通
        component_count: 連通分量數量
        start: 起點
        end: 終點
        output_path: 標籤圖輸出路徑 (未儲存時為 None)
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    source: Path
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    has_solution: bool
    component_count: int = Field(ge=1)
    start: EndpointInfo
    end: EndpointInfo
    output_path: Path | None = None

    @property
    def endpoints_found(self) -> bool:
        """起點與終點是否都有找到"""
        return self.start.found and self.end.found


class BatchResult(BaseModel):
    """
    批次處理結果

    Attributes:
        total: 總圖片數
        success: 成功數
        failed: 失敗數
        output_folder: 輸出資料夾路徑
        reports: 成功的求解結果
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    total: int = Field(ge=0)
    success: int = Field(ge=0)
    failed: int = Field(ge=0)
    output_folder: Path
    reports: tuple[MazeReport, ...] = Field(default_factory=tuple)

    @property
    def success_rate(self) -> float:
        """成功率"""
        return self.success / self.total if self.total > 0 else 0.0

    @property
    def is_complete_success(self) -> bool:
        """是否全部成功"""
        return self.failed == 0


# 支援的圖片格式
SUPPORTED_EXTENSIONS: frozenset[str] = frozenset(
    {".jpg", ".jpeg", ".png", ".webp", ".bmp", ".gif"}
)


def is_supported_image(path: Path) -> bool:
    """
    檢查檔案是否為支援的圖片格式

    Args:
        path: 檔案路徑

    Returns:
        是否為支援的圖片格式
    """
    return path.is_file() and path.suffix.lower() in SUPPORTED_EXTENSIONS

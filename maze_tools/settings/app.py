"""
應用程式設定

使用 Pydantic BaseSettings 管理環境變數和配置
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from maze_tools.common.color_filter import RGB, MarkerColor


class AppSettings(BaseSettings):
    """
    應用程式設定

    從環境變數和 .env 文件讀取設定

    Attributes:
        log_level: 日誌級別 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        on_threshold: 開狀態的明度閾值
        marker_color: 標記顏色
        marker_tolerance: 標記顏色每通道誤差
        highlight_color: 端點標示顏色
        first_component_color: 第一個分量的顏色
        seed: 調色盤亂數種子 (None 表示不固定)
        strict_markers: 標記不足時是否視為錯誤
        max_image_size: 最大圖片尺寸（像素）
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MAZE_",
        case_sensitive=False,
    )

    # 日誌設定
    log_level: str = "INFO"

    # 像素分類設定
    on_threshold: int = 128
    marker_color: MarkerColor = MarkerColor.RED
    marker_tolerance: int = 60

    # 繪製設定
    highlight_color: RGB = (0, 0, 0)
    first_component_color: RGB = (0, 0, 100)
    seed: int | None = None

    strict_markers: bool = False
    max_image_size: int = 4096  # 最大邊長（像素）

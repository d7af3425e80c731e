"""
資料模型模組

提供應用程式的核心資料結構，使用 Pydantic 進行驗證
"""

from .core import (
    SUPPORTED_EXTENSIONS,
    BatchResult,
    EndpointInfo,
    MazeReport,
    SolveConfig,
    is_supported_image,
)

__all__ = [
    "BatchResult",
    "EndpointInfo",
    "MazeReport",
    "SolveConfig",
    "SUPPORTED_EXTENSIONS",
    "is_supported_image",
]

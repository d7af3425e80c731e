"""
標記色彩過濾模組

定義用來辨識起點/終點標記像素的顏色判斷條件
"""

from enum import StrEnum
from typing import Annotated

import numpy as np
from pydantic import BaseModel, ConfigDict, Field


Channel = Annotated[int, Field(ge=0, le=255)]
RGB = tuple[Channel, Channel, Channel]


class MarkerColor(StrEnum):
    """標記顏色預設選項"""

    RED = "red"  # 純紅 (預設)
    GREEN = "green"  # 純綠
    BLUE = "blue"  # 純藍


MARKER_PRESETS: dict[MarkerColor, RGB] = {
    MarkerColor.RED: (255, 0, 0),
    MarkerColor.GREEN: (0, 255, 0),
    MarkerColor.BLUE: (0, 0, 255),
}


class MarkerFilterConfig(BaseModel):
    """
    標記過濾設定

    像素的每個通道與目標顏色相差都不超過 tolerance 時視為標記

    Attributes:
        rgb: 目標顏色
        tolerance: 每個通道允許的誤差 (0-255)
    """

    model_config = ConfigDict(frozen=True)

    rgb: RGB = MARKER_PRESETS[MarkerColor.RED]
    tolerance: int = Field(default=60, ge=0, le=255)

    @classmethod
    def from_preset(cls, color: MarkerColor | str, tolerance: int = 60) -> "MarkerFilterConfig":
        """
        從預設顏色建立設定

        Args:
            color: 預設顏色名稱
            tolerance: 每個通道允許的誤差

        Returns:
            標記過濾設定
        """
        return cls(rgb=MARKER_PRESETS[MarkerColor(color)], tolerance=tolerance)

    def mask(self, pixels: np.ndarray) -> np.ndarray:
        """
        向量化判斷整張圖的標記像素

        Args:
            pixels: RGB 陣列 (H, W, 3), uint8

        Returns:
            標記遮罩 (H, W), bool
        """
        target = np.asarray(self.rgb, dtype=np.int16)
        diff = np.abs(pixels[..., :3].astype(np.int16) - target)
        return np.all(diff <= self.tolerance, axis=-1)

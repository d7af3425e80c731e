"""
錯誤定義模組

迷宮連通分量工具共用的例外階層
"""


class MazeError(Exception):
    """迷宮處理錯誤 (所有自訂錯誤的基底類別)"""


class ImageLoadError(MazeError):
    """圖片無法載入或解碼"""


class CoordinateError(MazeError, IndexError):
    """座標或像素 ID 超出網格範圍"""


class MarkerNotFoundError(MazeError):
    """找不到足夠的起點/終點標記像素"""

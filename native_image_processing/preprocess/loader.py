"""
ImageLoader - 图像解码

解码失败不抛异常，统一返回 None，由调用方判空。
"""

from pathlib import Path

import cv2
import numpy as np

from ..context import PixelBuffer


class ImageLoader:
    """图像加载器"""

    def __init__(self, flags: int = cv2.IMREAD_UNCHANGED):
        """
        初始化加载器

        Args:
            flags: cv2.imread 标志，默认不做任何通道 / 位深转换
        """
        self.flags = flags

    def load(self, path: str | Path) -> PixelBuffer | None:
        """
        从文件路径解码图像

        Args:
            path: 文件路径（需可按 UTF-8 解码）

        Returns:
            PixelBuffer；文件不存在或无法解码时返回 None
        """
        path = Path(path)
        if not path.is_file():
            print(f"[Loader] 文件不存在: {path}")
            return None

        # 先读字节再 imdecode，避免 imread 对非 ASCII 路径的兼容问题
        try:
            raw = np.fromfile(str(path), dtype=np.uint8)
        except OSError as e:
            print(f"[Loader] 无法读取文件: {path} ({e})")
            return None
        image = cv2.imdecode(raw, self.flags) if raw.size > 0 else None
        if image is None or image.size == 0:
            print(f"[Loader] 无法解码图像: {path}")
            return None

        return PixelBuffer(image)


def decode(path: str | Path) -> PixelBuffer | None:
    """
    便捷函数：按默认标志解码图像

    Args:
        path: 文件路径

    Returns:
        PixelBuffer 或 None
    """
    return ImageLoader().load(path)

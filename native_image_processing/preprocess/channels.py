"""
ChannelNormalizer - 通道统一

任意 1/3/4 通道输入统一为 4 通道：
- QUAD: 原样返回
- TRI_CHANNEL: BGR -> RGBA（交换 R/B 并追加不透明 alpha）
- GRAYSCALE: 灰度复制到三个颜色通道 + 不透明 alpha
"""

import cv2
import numpy as np

from ..context import ChannelLayout, PixelBuffer


_CONVERSIONS = {
    ChannelLayout.TRI_CHANNEL: cv2.COLOR_BGR2RGBA,
    ChannelLayout.GRAYSCALE: cv2.COLOR_GRAY2RGBA,
}


def ensure_rgba(image: np.ndarray) -> np.ndarray:
    """
    将图像统一为 4 通道

    Args:
        image: (H,W)、(H,W,1)、(H,W,3) 或 (H,W,4)

    Returns:
        (H,W,4) 图像，位深不变

    Raises:
        ValueError: 通道数不受支持
    """
    layout = ChannelLayout.of(image)
    if layout is ChannelLayout.QUAD:
        return image
    if image.ndim == 3 and layout is ChannelLayout.GRAYSCALE:
        image = image[:, :, 0]
    return cv2.cvtColor(image, _CONVERSIONS[layout])


class ChannelNormalizer:
    """通道统一器"""

    def normalize(self, buffer: PixelBuffer) -> PixelBuffer:
        """统一为 RGBA；QUAD 输入直接返回原缓冲区"""
        if buffer.layout is ChannelLayout.QUAD:
            return buffer
        return PixelBuffer(ensure_rgba(buffer.data))

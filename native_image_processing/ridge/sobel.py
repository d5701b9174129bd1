"""
RidgeStrengthExtractor - Sobel 边缘强度提取

输出 = 0.5 * |Sobel_x| + 0.5 * |Sobel_y|（曼哈顿近似，非欧氏幅值）。
"""

import cv2
import numpy as np
from omegaconf import DictConfig

from ..context import ChannelLayout, PixelBuffer


def to_grayscale(image: np.ndarray) -> np.ndarray:
    """
    按通道布局转为单通道灰度

    4 通道按 RGBA 权重、3 通道按 BGR 权重，与宿主端输出一致。
    """
    layout = ChannelLayout.of(image)
    if layout is ChannelLayout.QUAD:
        return cv2.cvtColor(image, cv2.COLOR_RGBA2GRAY)
    if layout is ChannelLayout.TRI_CHANNEL:
        return cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)
    if image.ndim == 3:
        return image[:, :, 0].copy()
    return image.copy()


class RidgeStrengthExtractor:
    """Sobel 边缘强度提取器"""

    def __init__(
        self,
        blur_ksize: int = 3,
        sobel_ksize: int = 3,
        weight_x: float = 0.5,
        weight_y: float = 0.5,
        offset: float = 0.0
    ):
        """
        初始化提取器

        Args:
            blur_ksize: 高斯核大小（奇数），sigma 取 0 由核大小推导
            sobel_ksize: Sobel 核大小
            weight_x: x 方向权重
            weight_y: y 方向权重
            offset: 合成时的偏移量
        """
        if blur_ksize < 1 or blur_ksize % 2 == 0:
            raise ValueError(f"blur_ksize 必须是正奇数，当前: {blur_ksize}")
        if sobel_ksize not in (1, 3, 5, 7):
            raise ValueError(f"sobel_ksize 必须是 1/3/5/7，当前: {sobel_ksize}")
        self.blur_ksize = blur_ksize
        self.sobel_ksize = sobel_ksize
        self.weight_x = weight_x
        self.weight_y = weight_y
        self.offset = offset

    @classmethod
    def from_config(cls, cfg: DictConfig) -> "RidgeStrengthExtractor":
        """从配置的 ridge 段创建"""
        ridge_cfg = cfg.get("ridge", {})
        return cls(
            blur_ksize=ridge_cfg.get("blur_ksize", 3),
            sobel_ksize=ridge_cfg.get("sobel_ksize", 3),
            weight_x=ridge_cfg.get("weight_x", 0.5),
            weight_y=ridge_cfg.get("weight_y", 0.5),
            offset=ridge_cfg.get("offset", 0.0)
        )

    def extract(self, image: np.ndarray) -> np.ndarray:
        """
        计算边缘强度

        Args:
            image: 输入图像，1/3/4 通道

        Returns:
            边缘强度 uint8 (H,W)，与输入同尺寸
        """
        gray = to_grayscale(image)
        if gray.dtype == np.uint16:
            # CV_16S 输出只接受 8 位输入，16 位源图先压到 8 位
            gray = cv2.convertScaleAbs(gray, alpha=1.0 / 257.0)

        # 去噪
        gray = cv2.GaussianBlur(gray, (self.blur_ksize, self.blur_ksize), 0)

        # int16 中间结果，避免截断负梯度
        grad_x = cv2.Sobel(gray, cv2.CV_16S, 1, 0, ksize=self.sobel_ksize)
        grad_y = cv2.Sobel(gray, cv2.CV_16S, 0, 1, ksize=self.sobel_ksize)
        abs_grad_x = cv2.convertScaleAbs(grad_x)
        abs_grad_y = cv2.convertScaleAbs(grad_y)

        return cv2.addWeighted(
            abs_grad_x, self.weight_x, abs_grad_y, self.weight_y, self.offset
        )

    def extract_buffer(self, buffer: PixelBuffer) -> PixelBuffer:
        """PixelBuffer 版本的 extract"""
        return PixelBuffer(self.extract(buffer.data))

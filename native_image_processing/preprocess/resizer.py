"""
Resizer - 按目标宽度等比缩放

高度 = int(target_width / (src_w / src_h))，截断而非四舍五入。
放大同样使用 INTER_AREA，与宿主端输出保持数值一致。
"""

import cv2
import numpy as np
from omegaconf import DictConfig

from ..context import PixelBuffer


INTERPOLATIONS = {
    "area": cv2.INTER_AREA,
    "linear": cv2.INTER_LINEAR,
    "cubic": cv2.INTER_CUBIC,
    "nearest": cv2.INTER_NEAREST,
    "lanczos": cv2.INTER_LANCZOS4,
}


def validate_target_width(target_width: int) -> int:
    """
    校验目标宽度

    Raises:
        ValueError: 非整数或 <= 0
    """
    if isinstance(target_width, bool) or not isinstance(target_width, (int, np.integer)):
        raise ValueError(f"target_width 必须是整数，当前: {target_width!r}")
    if target_width <= 0:
        raise ValueError(f"target_width 必须大于 0，当前: {target_width}")
    return int(target_width)


def compute_resized_height(src_width: int, src_height: int, target_width: int) -> int:
    """
    计算等比缩放后的高度

    Args:
        src_width: 源图宽度
        src_height: 源图高度
        target_width: 目标宽度

    Returns:
        截断后的目标高度（可能为 0，由调用方处理）
    """
    if src_width <= 0 or src_height <= 0:
        raise ValueError(f"源图尺寸无效: {src_width}x{src_height}")
    aspect = float(src_width) / float(src_height)
    return int(target_width / aspect)


class Resizer:
    """等比缩放器"""

    def __init__(self, cfg: DictConfig | None = None):
        """
        初始化缩放器

        Args:
            cfg: 配置对象，可选 resize.interpolation（默认 "area"）
        """
        method = "area"
        if cfg is not None and "resize" in cfg:
            method = cfg.resize.get("interpolation", "area")
        if method not in INTERPOLATIONS:
            raise ValueError(
                f"未知插值方式: {method}，可选: {sorted(INTERPOLATIONS)}"
            )
        self.method = method
        self.interpolation = INTERPOLATIONS[method]

    def resize(self, buffer: PixelBuffer, target_width: int) -> PixelBuffer | None:
        """
        按目标宽度缩放，保持通道数不变

        Args:
            buffer: 源图
            target_width: 目标宽度（> 0）

        Returns:
            缩放后的 PixelBuffer；计算出的高度 < 1 时返回 None

        Raises:
            ValueError: target_width 无效
        """
        target_width = validate_target_width(target_width)
        target_height = compute_resized_height(buffer.width, buffer.height, target_width)
        if target_height < 1:
            print(
                f"[Resizer] 缩放后高度为 0: {buffer.width}x{buffer.height} -> 宽 {target_width}"
            )
            return None

        resized = cv2.resize(
            buffer.data,
            (target_width, target_height),  # cv2.resize 使用 (width, height)
            interpolation=self.interpolation
        )
        return PixelBuffer(resized)

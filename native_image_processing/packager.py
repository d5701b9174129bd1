"""
Packager - 输出打包

将像素缓冲区展平为行优先、通道交错、无行填充的字节序列，
并把宽高写入调用方提供的两元素输出位置。
"""

from collections.abc import MutableSequence

import numpy as np

from .context import ExtractionResult, PixelBuffer


def encode(buffer: PixelBuffer) -> bytes:
    """展平为原始字节（ascontiguousarray 去掉 ROI / 步长带来的行填充）"""
    return np.ascontiguousarray(buffer.data).tobytes()


def set_dimensions(
    dimensions: MutableSequence[int] | None,
    width: int,
    height: int
) -> None:
    """
    写入尺寸输出位置

    Args:
        dimensions: 至少两个槽位的可变序列；None 时忽略
        width: 宽度
        height: 高度
    """
    if dimensions is None:
        return
    if len(dimensions) < 2:
        raise ValueError(f"dimensions 至少需要 2 个槽位，当前: {len(dimensions)}")
    dimensions[0] = width
    dimensions[1] = height


class Packager:
    """输出打包器"""

    def pack(
        self,
        buffer: PixelBuffer | None,
        dimensions: MutableSequence[int] | None = None
    ) -> ExtractionResult:
        """
        打包结果；buffer 为空时输出空字节并写入 0/0

        Args:
            buffer: 最终像素缓冲区
            dimensions: 可选的尺寸输出位置

        Returns:
            ExtractionResult
        """
        if buffer is None or buffer.is_empty:
            return self.pack_empty(dimensions)

        set_dimensions(dimensions, buffer.width, buffer.height)
        return ExtractionResult(
            encode(buffer), buffer.width, buffer.height, buffer.data.dtype.name
        )

    @staticmethod
    def pack_empty(dimensions: MutableSequence[int] | None = None) -> ExtractionResult:
        """空结果，尺寸归零"""
        set_dimensions(dimensions, 0, 0)
        return ExtractionResult.empty()

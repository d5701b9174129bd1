"""
native-image-processing - 移动端图像提取与预处理

加载图像、按目标宽度等比缩放、统一为 RGBA，
并可选计算 Sobel 边缘强度图。
"""

from .context import (
    ChannelLayout,
    PixelBuffer,
    ExtractionResult,
    ProcessingOptions,
    ProcessingResult,
)
from .pipeline import NativeImageProcessor, load_processor, is_available

__all__ = [
    "ChannelLayout",
    "PixelBuffer",
    "ExtractionResult",
    "ProcessingOptions",
    "ProcessingResult",
    "NativeImageProcessor",
    "load_processor",
    "is_available",
]

"""
TextureExtractor - 纹理提取（未实现）

纹理像素读取依赖具体平台。当前实现始终返回空字节与 0/0 尺寸，
调用方据此降级处理而不是崩溃。将来接入平台读取器时，
不支持的平台仍需返回同样的结果。
"""

from collections.abc import MutableSequence
from typing import Any

from .context import ExtractionResult
from .packager import Packager


class TextureExtractor:
    """纹理提取器"""

    supported = False

    def __init__(self):
        self.packager = Packager()

    def extract(
        self,
        texture_handle: Any,
        target_width: int,
        dimensions: MutableSequence[int] | None = None
    ) -> ExtractionResult:
        """
        从纹理提取像素

        Args:
            texture_handle: 不透明纹理句柄，任意值
            target_width: 目标宽度（当前未使用）
            dimensions: 可选的尺寸输出位置

        Returns:
            始终为空结果，尺寸 0/0
        """
        print(f"[Texture] 当前平台不支持纹理提取: handle={texture_handle!r}")
        return self.packager.pack_empty(dimensions)

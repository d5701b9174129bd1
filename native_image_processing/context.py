"""
Context - 像素数据模型

贯穿整个提取流程的核心数据结构。
"""

from dataclasses import dataclass
from enum import Enum

import numpy as np


class ChannelLayout(Enum):
    """像素通道布局（按通道数解析一次）"""

    GRAYSCALE = 1
    TRI_CHANNEL = 3
    QUAD = 4

    @classmethod
    def from_channels(cls, channels: int) -> "ChannelLayout":
        """
        根据通道数解析布局

        Raises:
            ValueError: 通道数不是 1、3、4
        """
        try:
            return cls(channels)
        except ValueError:
            raise ValueError(f"不支持的通道数: {channels}（仅支持 1、3、4）") from None

    @classmethod
    def of(cls, image: np.ndarray) -> "ChannelLayout":
        """解析 ndarray 的通道布局，(H,W) 视为单通道"""
        channels = 1 if image.ndim == 2 else image.shape[2]
        return cls.from_channels(channels)


@dataclass
class PixelBuffer:
    """单次请求内独占的像素缓冲区"""

    data: np.ndarray               # (H,W) 或 (H,W,C)，uint8（16 位源图保持原位深）

    @property
    def width(self) -> int:
        return int(self.data.shape[1])

    @property
    def height(self) -> int:
        return int(self.data.shape[0])

    @property
    def channels(self) -> int:
        return 1 if self.data.ndim == 2 else int(self.data.shape[2])

    @property
    def layout(self) -> ChannelLayout:
        return ChannelLayout.from_channels(self.channels)

    @property
    def is_empty(self) -> bool:
        return self.data.size == 0


@dataclass
class ExtractionResult:
    """入口函数的返回值：原始字节 + 尺寸"""

    pixels: bytes = b""
    width: int = 0
    height: int = 0
    dtype: str = "uint8"           # 采样类型，16 位源图为 "uint16"

    @classmethod
    def empty(cls) -> "ExtractionResult":
        """失败 / 不支持时的结果：空字节，尺寸归零"""
        return cls(b"", 0, 0)

    @property
    def is_empty(self) -> bool:
        return len(self.pixels) == 0

    @property
    def channels(self) -> int:
        """由字节长度与采样宽度推算通道数"""
        if self.is_empty or self.width == 0 or self.height == 0:
            return 0
        itemsize = np.dtype(self.dtype).itemsize
        return len(self.pixels) // (self.width * self.height * itemsize)

    def to_array(self) -> np.ndarray:
        """
        还原为 ndarray（dtype 与打包时一致）

        Returns:
            (H,W) 单通道或 (H,W,C) 多通道；空结果返回 shape (0, 0)
        """
        if self.is_empty:
            return np.zeros((0, 0), dtype=self.dtype)
        flat = np.frombuffer(self.pixels, dtype=self.dtype)
        channels = self.channels
        if channels == 1:
            return flat.reshape(self.height, self.width)
        return flat.reshape(self.height, self.width, channels)


@dataclass
class ProcessingOptions:
    """process_image 的请求参数"""

    uri: str | None = None
    texture_id: int | None = None
    target_width: int | None = None        # None 时使用配置中的默认宽度
    include_ridge_strength: bool = False


@dataclass
class ProcessingResult:
    """process_image 的返回值"""

    pixels: bytes
    width: int
    height: int
    dtype: str = "uint8"

    # 仅在请求且计算成功时附带
    ridge_strength: bytes | None = None
    ridge_width: int | None = None
    ridge_height: int | None = None

    @property
    def has_ridge_strength(self) -> bool:
        return self.ridge_strength is not None

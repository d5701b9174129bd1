"""
Preprocess 模块 - 图像加载与预处理

职责：
- 从文件路径解码图像（保留原始通道数与位深）
- 按目标宽度等比缩放（INTER_AREA）
- 统一输出为 4 通道 RGBA
"""

from .loader import ImageLoader, decode
from .resizer import Resizer, compute_resized_height
from .channels import ChannelNormalizer, ensure_rgba

__all__ = [
    "ImageLoader",
    "decode",
    "Resizer",
    "compute_resized_height",
    "ChannelNormalizer",
    "ensure_rgba",
]

"""
Ridge 模块 - 边缘强度图

职责：
- 灰度化 + 3x3 高斯模糊去噪
- Sobel x/y 梯度（int16 中间结果）
- 0.5/0.5 加权合成单通道 uint8 边缘强度
"""

from .sobel import RidgeStrengthExtractor, to_grayscale

__all__ = ["RidgeStrengthExtractor", "to_grayscale"]

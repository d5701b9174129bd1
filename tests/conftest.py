"""
共享 fixture
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import cv2
import numpy as np
import pytest
from omegaconf import OmegaConf


@pytest.fixture
def config():
    """测试配置"""
    return OmegaConf.create({
        "global": {"default_target_width": 64},
        "resize": {"interpolation": "area"},
        "ridge": {
            "blur_ksize": 3,
            "sobel_ksize": 3,
            "weight_x": 0.5,
            "weight_y": 0.5,
            "offset": 0.0
        }
    })


@pytest.fixture
def write_image(tmp_path):
    """将 ndarray 写成 PNG 并返回路径"""
    def _write(image: np.ndarray, name: str = "image.png") -> Path:
        path = tmp_path / name
        assert cv2.imwrite(str(path), image)
        return path
    return _write


@pytest.fixture
def bgr_image():
    """随机 BGR 图像 (30x40)"""
    return np.random.randint(0, 256, (30, 40, 3), dtype=np.uint8)


@pytest.fixture
def step_edge_image():
    """左黑右白的灰度图 (16x32)，竖直边界在第 16 列"""
    img = np.zeros((16, 32), dtype=np.uint8)
    img[:, 16:] = 255
    return img

#!/usr/bin/env python
"""
native-image-processing Demo - 命令行演示脚本

使用方法:
    python examples/demo.py [input_image] [--width 640] [--ridge]

示例:
    python examples/demo.py photo.jpg --width 320 --ridge
"""

import sys
from pathlib import Path

# 添加项目根目录到路径
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import argparse
import numpy as np
from PIL import Image

from native_image_processing import ProcessingOptions, load_processor


def create_sample_image(width: int = 512, height: int = 384) -> np.ndarray:
    """
    创建一个示例图像（左右分区 + 中间矩形，便于观察边缘）

    Returns:
        uint8 RGB 图像
    """
    img = np.zeros((height, width, 3), dtype=np.uint8)

    # 左半部分：深蓝
    img[:, : width // 2] = (30, 40, 90)

    # 右半部分：浅黄
    img[:, width // 2:] = (230, 210, 140)

    # 中间矩形：灰色
    img[height // 4: height * 3 // 4, width // 3: width * 2 // 3] = 128

    # 添加随机噪声使图像更自然
    noise = np.random.randint(-10, 10, img.shape, dtype=np.int16)
    img = np.clip(img.astype(np.int16) + noise, 0, 255).astype(np.uint8)

    return img


def main():
    parser = argparse.ArgumentParser(description="native-image-processing Demo")
    parser.add_argument("input", nargs="?", help="输入图像路径")
    parser.add_argument("--width", type=int, default=None, help="目标宽度（默认读取配置）")
    parser.add_argument("--ridge", action="store_true", help="同时输出边缘强度图")
    parser.add_argument("--output-dir", default=None, help="输出目录（默认 examples/）")

    args = parser.parse_args()
    output_dir = Path(args.output_dir) if args.output_dir else project_root / "examples"
    output_dir.mkdir(parents=True, exist_ok=True)

    # 创建示例图像
    if args.input is None:
        print("创建示例图像...")
        sample_path = output_dir / "sample_input.png"
        Image.fromarray(create_sample_image()).save(sample_path)
        print(f"示例图像已保存到: {sample_path}")
        input_path = sample_path
    else:
        input_path = Path(args.input)

    processor = load_processor()

    print(f"处理图像: {input_path}")
    result = processor.process_image(ProcessingOptions(
        uri=str(input_path),
        target_width=args.width,
        include_ridge_strength=args.ridge
    ))

    if result.width == 0 or result.height == 0:
        print("无法解码图像，未生成输出")
        return 1

    print(f"输出尺寸: {result.width}x{result.height}")
    rgba = np.frombuffer(result.pixels, dtype=result.dtype).reshape(result.height, result.width, 4)
    if rgba.dtype == np.uint16:
        # Pillow 不支持 16 位 RGBA，保存前压到 8 位
        rgba = (rgba >> 8).astype(np.uint8)
    rgba_path = output_dir / f"{input_path.stem}_rgba.png"
    Image.fromarray(rgba).save(rgba_path)
    print(f"RGBA 已保存到: {rgba_path}")

    if result.has_ridge_strength:
        ridge = np.frombuffer(result.ridge_strength, dtype=np.uint8).reshape(
            result.ridge_height, result.ridge_width
        )
        ridge_path = output_dir / f"{input_path.stem}_ridge.png"
        Image.fromarray(ridge).save(ridge_path)
        print(f"边缘强度图已保存到: {ridge_path}")

    print("完成!")
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
NativeImageProcessor - 主处理流水线

图像提取的核心入口：加载 -> 缩放 -> 通道统一 / 边缘强度 -> 打包。
每次调用独立完成，不在调用之间保留任何像素数据。
"""

from collections.abc import MutableSequence
from dataclasses import fields
from pathlib import Path
from typing import Any
from urllib.parse import unquote, urlparse

from omegaconf import OmegaConf, DictConfig

from .context import ExtractionResult, ProcessingOptions, ProcessingResult
from .preprocess.resizer import validate_target_width


DEFAULT_CONFIG_PATH = Path(__file__).parent / "config" / "default.yaml"

ENTRY_POINTS = (
    "extract_from_file",
    "extract_from_texture",
    "compute_ridge_strength",
    "process_image",
)


def uri_to_path(uri: str) -> str:
    """
    将 file:// URI 转为文件路径，普通路径原样返回

    Raises:
        ValueError: 非 file 协议的 URI
    """
    # 只有带 "://" 的才按 URI 解析，img:1.png 之类仍是本地路径
    if "://" not in uri:
        return uri
    parsed = urlparse(uri)
    if parsed.scheme == "file":
        return unquote(parsed.path)
    raise ValueError(f"仅支持本地文件 URI，当前: {uri}")


class NativeImageProcessor:
    """图像提取主 Pipeline"""

    def __init__(self, config_path: str | Path | DictConfig | None = None):
        """
        初始化 Pipeline

        Args:
            config_path: 配置文件路径或 DictConfig，默认使用 config/default.yaml
        """
        # 加载配置
        if isinstance(config_path, DictConfig):
            self.cfg = config_path
        else:
            if config_path is None:
                config_path = DEFAULT_CONFIG_PATH
            self.cfg: DictConfig = OmegaConf.load(config_path)

        global_cfg = self.cfg.get("global", {})
        self.default_target_width = global_cfg.get("default_target_width", 640)

        # 初始化各模块（延迟加载）
        self._loader = None
        self._resizer = None
        self._normalizer = None
        self._ridge = None
        self._texture = None
        self._packager = None

    # ==================== 模块懒加载 ====================

    @property
    def loader(self):
        """图像加载模块（懒加载）"""
        if self._loader is None:
            from .preprocess import ImageLoader
            self._loader = ImageLoader()
        return self._loader

    @property
    def resizer(self):
        """缩放模块（懒加载）"""
        if self._resizer is None:
            from .preprocess import Resizer
            self._resizer = Resizer(self.cfg)
        return self._resizer

    @property
    def normalizer(self):
        """通道统一模块（懒加载）"""
        if self._normalizer is None:
            from .preprocess import ChannelNormalizer
            self._normalizer = ChannelNormalizer()
        return self._normalizer

    @property
    def ridge(self):
        """边缘强度模块（懒加载）"""
        if self._ridge is None:
            from .ridge import RidgeStrengthExtractor
            self._ridge = RidgeStrengthExtractor.from_config(self.cfg)
        return self._ridge

    @property
    def texture(self):
        """纹理提取模块（懒加载）"""
        if self._texture is None:
            from .texture import TextureExtractor
            self._texture = TextureExtractor()
        return self._texture

    @property
    def packager(self):
        """打包模块（懒加载）"""
        if self._packager is None:
            from .packager import Packager
            self._packager = Packager()
        return self._packager

    # ==================== 入口函数 ====================

    def extract_from_file(
        self,
        path: str | Path,
        target_width: int,
        dimensions: MutableSequence[int] | None = None
    ) -> ExtractionResult:
        """
        从文件提取 RGBA 像素

        Args:
            path: 图像文件路径
            target_width: 目标宽度（> 0）
            dimensions: 可选的 [width, height] 输出位置

        Returns:
            RGBA 字节与尺寸；解码失败时为空结果，尺寸 0/0

        Raises:
            ValueError: target_width 无效
        """
        target_width = validate_target_width(target_width)

        image = self.loader.load(path)
        if image is None:
            return self.packager.pack_empty(dimensions)

        resized = self.resizer.resize(image, target_width)
        if resized is None:
            return self.packager.pack_empty(dimensions)

        rgba = self.normalizer.normalize(resized)
        return self.packager.pack(rgba, dimensions)

    def extract_from_texture(
        self,
        texture_handle: Any,
        target_width: int,
        dimensions: MutableSequence[int] | None = None
    ) -> ExtractionResult:
        """
        从纹理提取像素（未实现，始终返回空结果与 0/0 尺寸）
        """
        return self.texture.extract(texture_handle, target_width, dimensions)

    def compute_ridge_strength(
        self,
        path: str | Path,
        target_width: int,
        dimensions: MutableSequence[int] | None = None
    ) -> ExtractionResult:
        """
        计算边缘强度图（先缩放再提取）

        Args:
            path: 图像文件路径
            target_width: 目标宽度（> 0）
            dimensions: 可选的 [width, height] 输出位置

        Returns:
            单通道字节与尺寸；解码失败时为空结果，尺寸 0/0

        Raises:
            ValueError: target_width 无效
        """
        target_width = validate_target_width(target_width)

        image = self.loader.load(path)
        if image is None:
            return self.packager.pack_empty(dimensions)

        resized = self.resizer.resize(image, target_width)
        if resized is None:
            return self.packager.pack_empty(dimensions)

        ridge = self.ridge.extract_buffer(resized)
        return self.packager.pack(ridge, dimensions)

    # ==================== 宿主模块接口 ====================

    def process_image(
        self,
        options: ProcessingOptions | dict[str, Any]
    ) -> ProcessingResult:
        """
        单一入口：按 texture_id 或 uri 提取像素，可选附带边缘强度

        Args:
            options: ProcessingOptions 或等价的 dict

        Returns:
            ProcessingResult

        Raises:
            ValueError: 未知参数、未提供 uri 与 texture_id，或 target_width 无效
        """
        # 统一 options 格式
        if isinstance(options, dict):
            known = {f.name for f in fields(ProcessingOptions)}
            unknown = sorted(set(options) - known)
            if unknown:
                raise ValueError(f"未知参数: {unknown}，可选: {sorted(known)}")
            options = ProcessingOptions(**options)

        if options.uri is None and options.texture_id is None:
            raise ValueError("需要提供文件 URI 或纹理 ID")

        target_width = options.target_width
        if target_width is None:
            target_width = self.default_target_width

        path = None
        if options.texture_id is not None:
            result = self.extract_from_texture(options.texture_id, target_width)
        else:
            path = uri_to_path(options.uri)
            result = self.extract_from_file(path, target_width)

        processed = ProcessingResult(
            pixels=result.pixels,
            width=result.width,
            height=result.height,
            dtype=result.dtype
        )

        # 边缘强度只在成功时附带
        if options.include_ridge_strength and path is not None:
            ridge = self.compute_ridge_strength(path, target_width)
            if not ridge.is_empty and ridge.width and ridge.height:
                processed.ridge_strength = ridge.pixels
                processed.ridge_width = ridge.width
                processed.ridge_height = ridge.height

        return processed


def is_available() -> bool:
    """检查处理后端（OpenCV）可导入且入口函数齐全"""
    try:
        import cv2
    except ImportError:
        return False
    if not hasattr(cv2, "imdecode"):
        return False
    return all(
        callable(getattr(NativeImageProcessor, name, None))
        for name in ENTRY_POINTS
    )


def load_processor(config_path: str | Path | DictConfig | None = None) -> NativeImageProcessor:
    """
    便捷函数：加载 Pipeline

    Args:
        config_path: 配置文件路径

    Returns:
        NativeImageProcessor 实例
    """
    return NativeImageProcessor(config_path)

"""镜像管理器类 - 门面模式实现"""

from pathlib import Path
from typing import List, Optional

from docker.client import DockerClient

from .base_manager import BaseManager
from .config_manager import BuildSettings
from .image.base import ImageReference
from .image.build import ImageBuilder


class ImageManager(BaseManager):
    """镜像管理器类，用于构建镜像并添加标签"""

    def __init__(self, settings: BuildSettings, docker_client: Optional[DockerClient] = None) -> None:
        """
        初始化镜像管理器

        Args:
            settings: 构建配置
            docker_client: Docker客户端实例，可选
        """
        super().__init__(docker_client)
        self.resource_dir = Path(settings["resource_dir"])
        self.base_image = settings["base_image"]
        self.golang_image = settings["golang_image"]
        self._builder: Optional[ImageBuilder] = None

    @property
    def builder(self) -> ImageBuilder:
        """获取镜像构建器，首次使用时创建Docker客户端"""
        if self._builder is None:
            self._builder = ImageBuilder(self.docker_client, self.resource_dir, self.base_image, self.golang_image)
        return self._builder

    def build_image(self, reference: ImageReference, latest: bool = False, edge: bool = False) -> List[str]:
        """
        构建Docker镜像

        Args:
            reference: 镜像引用
            latest: 是否额外添加latest标签
            edge: 是否额外添加edge标签

        Returns:
            List[str]: 构建得到的全部镜像名

        Raises:
            InvalidTagError: 标签无效时抛出
            TemplateError: 生成Dockerfile失败时抛出
            ImageBuildError: 构建失败时抛出
        """
        return self.builder.build(reference, latest, edge)

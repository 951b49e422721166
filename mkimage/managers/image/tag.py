"""镜像标签管理相关功能"""

import docker
from loguru import logger

from ...constants import ERROR_MESSAGES
from .base import ImageBuildError


class ImageTagger:
    """镜像标签管理器类"""

    def __init__(self, docker_client):
        """
        初始化镜像标签管理器

        Args:
            docker_client: Docker客户端实例
        """
        self.docker_client = docker_client

    def tag(self, source_tag: str, new_tag: str) -> None:
        """
        为镜像添加新标签

        Args:
            source_tag: 源镜像标签
            new_tag: 新标签，格式为 "仓库名:标签"

        Raises:
            ImageBuildError: 添加标签失败时抛出
        """
        repository, _, tag = new_tag.rpartition(":")
        try:
            image = self.docker_client.images.get(source_tag)
            if not image.tag(repository, tag=tag):
                raise ImageBuildError(ERROR_MESSAGES["tag_failed"].format(source_tag, new_tag, "Docker返回失败"))
        except docker.errors.DockerException as e:
            raise ImageBuildError(ERROR_MESSAGES["tag_failed"].format(source_tag, new_tag, e)) from e
        logger.success(f"已为镜像 {source_tag} 添加标签 {new_tag}")

"""镜像构建相关功能"""

from pathlib import Path
from typing import List

import docker
from loguru import logger

from ...constants import DEFAULT_FILES, ERROR_MESSAGES
from .base import ImageBuildError, ImageReference
from .tag import ImageTagger
from .template import create_build_context, find_checksum
from .utils import get_build_name, get_extra_tags, parse_version, validate_tag


class ImageBuilder:
    """镜像构建器类"""

    def __init__(self, docker_client, resource_dir: Path, base_image: str, golang_image: str) -> None:
        """
        初始化镜像构建器

        Args:
            docker_client: Docker客户端实例
            resource_dir: 模板、校验和清单和入口脚本所在目录
            base_image: 基础镜像
            golang_image: golang编译镜像
        """
        self.docker_client = docker_client
        self.resource_dir = Path(resource_dir) if isinstance(resource_dir, str) else resource_dir
        self.base_image = base_image
        self.golang_image = golang_image
        self.tagger = ImageTagger(docker_client)

    def build(self, reference: ImageReference, latest: bool = False, edge: bool = False) -> List[str]:
        """
        构建Docker镜像并添加额外标签

        Args:
            reference: 镜像引用，标签即为要构建的版本号
            latest: 构建成功后是否添加latest标签
            edge: 构建成功后是否添加edge标签

        Returns:
            List[str]: 构建得到的全部镜像名

        Raises:
            InvalidTagError: 标签无效时抛出
            TemplateError: 生成Dockerfile失败时抛出
            ImageBuildError: 构建或添加标签失败时抛出
        """
        validate_tag(reference)

        version = reference["tag"]
        semver = parse_version(version)
        logger.debug(f"版本号: major={semver['major']} minor={semver['minor']} patch={semver['patch']}")

        checksum = find_checksum(self.resource_dir / DEFAULT_FILES["checksums"], version)
        context_dir = create_build_context(
            self.resource_dir,
            {
                "base_image": self.base_image,
                "golang_image": self.golang_image,
                "version": version,
                "checksum": checksum,
            },
        )

        build_name = get_build_name(reference)
        logger.warning(f"开始构建镜像 {build_name}...")
        self._build_with_progress(context_dir, build_name)
        logger.success(f"镜像 {build_name} 构建成功")

        images = [build_name]
        for extra_tag in get_extra_tags(reference, latest, edge):
            self.tagger.tag(build_name, extra_tag)
            images.append(extra_tag)
        return images

    def _build_with_progress(self, context_dir: Path, image_name: str) -> None:
        """
        构建镜像并显示进度

        Args:
            context_dir: 构建上下文目录
            image_name: 镜像名称

        Raises:
            ImageBuildError: 构建失败时抛出
        """
        try:
            build_result = self.docker_client.api.build(
                path=str(context_dir),
                tag=image_name,
                decode=True,
                rm=True,
            )

            # 处理构建输出
            for line in build_result:
                if "stream" in line:
                    log_line = line["stream"].strip()
                    if log_line:
                        logger.info(log_line)
                elif "error" in line:
                    exit_code = line.get("errorDetail", {}).get("code") or 1
                    logger.error(line["error"].strip())
                    raise ImageBuildError(ERROR_MESSAGES["build_failed"].format(exit_code), exit_code)
                elif "status" in line:
                    logger.info(line["status"])
        except docker.errors.DockerException as e:
            logger.error(f"构建镜像失败: {e}")
            raise ImageBuildError(ERROR_MESSAGES["build_failed"].format(1)) from e

"""构建前置条件检查"""

import subprocess
from typing import Optional

import docker
from docker.client import DockerClient
from loguru import logger

from ..constants import DOCKER_CONFIG, ERROR_MESSAGES
from ..utils import command_exists, run_command
from .base_manager import BaseManager, DockerNotFoundError
from .image.base import EngineVersion
from .image.utils import get_build_base, parse_image_reference, parse_version


class DockerVersionError(Exception):
    """Docker版本过低或无法识别"""
    pass


class BaseImageNotFoundError(Exception):
    """前置镜像不存在"""
    pass


def parse_docker_version_output(output: str) -> str:
    """
    从 `docker -v` 的输出中提取版本号

    例如 "Docker version 17.05.0-ce, build 89658be" 得到 "17.05.0-ce"

    Args:
        output: `docker -v` 的输出

    Returns:
        str: 版本号字符串，无法提取时为空字符串
    """
    fields = output.strip().split(" ")
    if len(fields) < 3:
        return ""
    return fields[2].split(",", 1)[0]


def parse_engine_version(version: str) -> EngineVersion:
    """
    将Docker版本号解析为可比较的数字形式

    Args:
        version: 版本号字符串

    Returns:
        EngineVersion: 引擎版本

    Raises:
        DockerVersionError: major或minor不是数字时抛出
    """
    semver = parse_version(version)
    try:
        return {"major": int(semver["major"]), "minor": int(semver["minor"]), "patch": semver["patch"]}
    except ValueError as e:
        raise DockerVersionError(ERROR_MESSAGES["docker_version_unknown"].format(version)) from e


def supports_multi_stage(engine_version: EngineVersion) -> bool:
    """判断引擎版本是否支持多阶段构建"""
    if engine_version["major"] < DOCKER_CONFIG["min_major"]:
        return False
    if engine_version["major"] == DOCKER_CONFIG["min_major"] and engine_version["minor"] < DOCKER_CONFIG["min_minor"]:
        return False
    return True


class PrerequisiteChecker(BaseManager):
    """检查Docker环境和前置镜像"""

    def __init__(self, base_image: str, golang_image: str, docker_client: Optional[DockerClient] = None) -> None:
        """
        初始化前置条件检查器

        Args:
            base_image: 基础镜像，例如 base/alpine:3.5.0
            golang_image: golang编译镜像，例如 base/golang:1.8
            docker_client: Docker客户端实例
        """
        super().__init__(docker_client)
        self.base_image = base_image
        self.golang_image = golang_image

    def check_all(self) -> EngineVersion:
        """
        依次检查Docker和前置镜像

        Returns:
            EngineVersion: 当前Docker引擎版本

        Raises:
            DockerNotFoundError: Docker不可用时抛出
            DockerVersionError: Docker版本不支持多阶段构建时抛出
            BaseImageNotFoundError: 前置镜像不存在时抛出
        """
        engine_version = self.check_docker()
        self.check_images()
        return engine_version

    def check_docker(self) -> EngineVersion:
        """
        检查Docker是否安装以及版本是否支持多阶段构建

        Returns:
            EngineVersion: 当前Docker引擎版本

        Raises:
            DockerNotFoundError: 未找到docker命令时抛出
            DockerVersionError: 版本过低或无法识别时抛出
        """
        binary = DOCKER_CONFIG["binary"]
        if not command_exists(binary):
            raise DockerNotFoundError(ERROR_MESSAGES["docker_not_found"].format(DOCKER_CONFIG["install_url"]))

        try:
            _, stdout, _ = run_command([binary, "-v"])
        except (OSError, subprocess.CalledProcessError) as e:
            raise DockerNotFoundError(ERROR_MESSAGES["docker_not_found"].format(DOCKER_CONFIG["install_url"])) from e

        version = parse_docker_version_output(stdout)
        logger.info(f"Docker版本: {version}")

        engine_version = parse_engine_version(version)
        if not supports_multi_stage(engine_version):
            raise DockerVersionError(
                ERROR_MESSAGES["docker_version_unsupported"].format(version, DOCKER_CONFIG["install_url"])
            )
        return engine_version

    def check_images(self) -> None:
        """
        检查基础镜像和golang镜像是否存在于本地

        只比较仓库名，不比较版本标签。

        Raises:
            DockerNotFoundError: 无法连接Docker守护进程时抛出
            BaseImageNotFoundError: 镜像不存在时抛出
        """
        if not self._check_docker_connection():
            raise DockerNotFoundError(ERROR_MESSAGES["docker_connection"].format("ping失败"))

        if not self.image_exists(self.base_image):
            raise BaseImageNotFoundError(ERROR_MESSAGES["base_image_missing"].format(self.base_image))

        if not self.image_exists(self.golang_image):
            raise BaseImageNotFoundError(ERROR_MESSAGES["golang_image_missing"].format(self.golang_image))

    def image_exists(self, image: str) -> bool:
        """
        检查本地是否有该仓库的镜像

        Args:
            image: 镜像引用，标签会被忽略

        Returns:
            bool: 是否存在
        """
        repository = get_build_base(parse_image_reference(image))
        try:
            images = self.docker_client.images.list(name=repository)
        except docker.errors.APIError as e:
            logger.error(f"获取镜像列表失败: {e}")
            raise DockerNotFoundError(ERROR_MESSAGES["docker_connection"].format(e)) from e
        return len(images) > 0

"""Docker镜像构建管理器模块

该模块包含各种管理器类，用于检查构建环境、读取配置和构建镜像。
"""

from .base_manager import BaseManager, DockerNotFoundError
from .config_manager import BuildSettings, ConfigError, ConfigManager
from .image_manager import ImageManager
from .prerequisite_manager import BaseImageNotFoundError, DockerVersionError, PrerequisiteChecker

__all__ = [
    "BaseManager",
    "BuildSettings",
    "ConfigManager",
    "ConfigError",
    "DockerNotFoundError",
    "DockerVersionError",
    "BaseImageNotFoundError",
    "ImageManager",
    "PrerequisiteChecker",
]

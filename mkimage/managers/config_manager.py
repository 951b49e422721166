"""配置管理器类"""

import os
from pathlib import Path
from typing import Mapping, Optional, TypedDict

from dotenv import load_dotenv
from loguru import logger

from ..constants import ENV_DEFAULTS, ERROR_MESSAGES, REQUIRED_FILES


class ConfigError(Exception):
    """配置错误"""

    pass


class BuildSettings(TypedDict):
    """单次构建的配置"""
    base_image: str
    golang_image: str
    resource_dir: Path
    log_level: str


class ConfigManager:
    """配置管理器类，从环境变量和 .env 文件读取构建配置"""

    environ: Mapping[str, str]
    settings: Optional[BuildSettings]

    def __init__(self, environ: Optional[Mapping[str, str]] = None, dotenv_path: Optional[str] = None) -> None:
        """
        初始化配置管理器

        Args:
            environ: 环境变量映射，默认为 os.environ
            dotenv_path: .env 文件路径，默认在当前目录查找
        """
        if environ is None:
            # 已存在的环境变量优先于 .env 文件
            load_dotenv(dotenv_path or os.path.join(os.getcwd(), ".env"), override=False)
            environ = os.environ
        self.environ = environ
        self.settings = None

    def _get(self, key: str) -> str:
        """读取环境变量，未设置或为空时使用默认值"""
        return self.environ.get(key) or ENV_DEFAULTS[key]  # type: ignore[literal-required]

    def load_settings(self) -> BuildSettings:
        """
        加载构建配置

        Returns:
            BuildSettings: 加载的配置

        Raises:
            ConfigError: 配置验证失败时抛出
        """
        settings: BuildSettings = {
            "base_image": self._get("BASE_IMAGE"),
            "golang_image": self._get("GOLANG_IMAGE"),
            "resource_dir": Path(self._get("MKIMAGE_RESOURCE_DIR")).expanduser(),
            "log_level": self._get("MKIMAGE_LOG_LEVEL").upper(),
        }
        self.settings = settings
        self.validate_settings()
        logger.debug(f"基础镜像: {settings['base_image']}, golang镜像: {settings['golang_image']}")
        return settings

    def validate_settings(self) -> None:
        """
        验证日志级别和构建资源目录的完整性

        Raises:
            ConfigError: 配置验证失败时抛出
        """
        if self.settings is None:
            raise ConfigError(ERROR_MESSAGES["config_validation"].format("配置尚未加载"))

        log_level = self.settings["log_level"]
        try:
            logger.level(log_level)
        except ValueError as e:
            raise ConfigError(
                ERROR_MESSAGES["config_validation"].format(ERROR_MESSAGES["log_level_invalid"].format(log_level))
            ) from e

        resource_dir = self.settings["resource_dir"]
        if not resource_dir.is_dir():
            raise ConfigError(
                ERROR_MESSAGES["config_validation"].format(
                    ERROR_MESSAGES["file_not_found"].format("资源目录", resource_dir)
                )
            )

        missing_files = [name for name in REQUIRED_FILES if not (resource_dir / name).exists()]
        if missing_files:
            raise ConfigError(
                ERROR_MESSAGES["config_validation"].format(
                    ERROR_MESSAGES["file_not_found"].format("必需文件", ", ".join(missing_files))
                )
            )

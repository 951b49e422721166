"""常量配置模块"""

from pathlib import Path
from typing import List, Tuple, TypedDict

# 镜像相关
IMAGE_NAME: str = "traefik"

# 保留标签，只能通过 --latest / --edge 参数添加
RESERVED_TAGS: Tuple[str, ...] = ("latest", "edge")

# 文件相关
class DefaultFiles(TypedDict):
    dockerfile: str
    checksums: str
    entrypoint: str

DEFAULT_FILES: DefaultFiles = {
    "dockerfile": "Dockerfile",
    "checksums": "SHASUMS256.txt",
    "entrypoint": "docker-entrypoint.sh",
}

REQUIRED_FILES: List[str] = [
    DEFAULT_FILES["dockerfile"],
    DEFAULT_FILES["checksums"],
    DEFAULT_FILES["entrypoint"],
]

# 随包发布的构建资源目录
RESOURCE_DIR: Path = Path(__file__).resolve().parent / "resources" / IMAGE_NAME

# 模板占位符
TEMPLATE_PLACEHOLDERS: List[str] = ["base_image", "golang_image", "version", "checksum"]

# 环境变量配置
class EnvDefaults(TypedDict):
    BASE_IMAGE: str
    GOLANG_IMAGE: str
    MKIMAGE_RESOURCE_DIR: str
    MKIMAGE_LOG_LEVEL: str

ENV_DEFAULTS: EnvDefaults = {
    "BASE_IMAGE": "base/alpine:3.5.0",
    "GOLANG_IMAGE": "base/golang:1.23",
    "MKIMAGE_RESOURCE_DIR": str(RESOURCE_DIR),
    "MKIMAGE_LOG_LEVEL": "INFO",
}

# Docker相关配置，多阶段构建自 17.05 起可用
class DockerConfig(TypedDict):
    binary: str
    min_major: int
    min_minor: int
    install_url: str

DOCKER_CONFIG: DockerConfig = {
    "binary": "docker",
    "min_major": 17,
    "min_minor": 5,
    "install_url": "https://get.docker.com/",
}

# 使用说明
USAGE: str = f"""
该脚本用于构建 {IMAGE_NAME} 基础镜像。

   用法: mkimage [-t tag] [-l | --latest] [-e | --edge]
   示例: mkimage -t somerepo/{IMAGE_NAME}:3.2.8 -l

   构建: somerepo/{IMAGE_NAME}:3.2.8
         somerepo/{IMAGE_NAME}:latest
"""

# 错误消息
class ErrorMessages(TypedDict):
    docker_not_found: str
    docker_connection: str
    docker_version_unknown: str
    docker_version_unsupported: str
    base_image_missing: str
    golang_image_missing: str
    log_level_invalid: str
    tag_missing: str
    tag_empty: str
    tag_reserved: str
    file_not_found: str
    checksum_not_found: str
    placeholder_unresolved: str
    build_failed: str
    tag_failed: str
    config_validation: str

ERROR_MESSAGES: ErrorMessages = {
    "docker_not_found": (
        "系统中未找到docker。\n"
        "请安装docker后重试，可以使用以下命令安装:\n\n"
        "    curl -sSL {} | sh\n"
    ),
    "docker_connection": "无法连接到Docker守护进程: {}",
    "docker_version_unknown": "无法识别的Docker版本: {}",
    "docker_version_unsupported": (
        "Docker {} 不支持多阶段构建。\n"
        "请安装更新版本的Docker后重试，可以使用以下命令安装:\n\n"
        "    curl -sSL {} | sh\n"
    ),
    "base_image_missing": (
        "未找到基础镜像。\n"
        "请先构建 \"{0}\" 镜像再构建该镜像:\n\n"
        "    sh mkimage.sh alpine -t {0}\n"
    ),
    "golang_image_missing": (
        "未找到golang镜像。\n"
        "请先构建 {0} 镜像再构建该镜像。\n\n"
        "注意: 构建完成后可以删除golang镜像。\n\n"
        "    sh mkimage.sh golang -t {0}\n"
    ),
    "log_level_invalid": "未知的日志级别: {} (MKIMAGE_LOG_LEVEL)",
    "tag_missing": "必须使用 -t/--tag 指定镜像标签",
    "tag_empty": "无效的镜像标签: {} 中缺少版本标签",
    "tag_reserved": "无效的镜像标签。\n如需添加 '{0}' 标签，请使用 --{0} 参数。",
    "file_not_found": "{}不存在: {}",
    "checksum_not_found": (
        "{0} 中未找到版本 {1} 的校验和。\n"
        "请下载源码包并追加校验和后重试:\n\n"
        "    sha256sum traefik-{1}.tar.gz >> {0}\n"
    ),
    "placeholder_unresolved": "Dockerfile模板中存在未替换的占位符: {}",
    "build_failed": "Docker构建失败。\nDocker退出码: {}",
    "tag_failed": "为镜像 {} 添加标签 {} 失败: {}",
    "config_validation": "配置验证失败: {}",
}

"""Dockerfile模板和构建上下文相关功能"""

import os
import re
import shutil
import tempfile
from pathlib import Path
from typing import Dict

from loguru import logger

from ...constants import DEFAULT_FILES, ERROR_MESSAGES, IMAGE_NAME, TEMPLATE_PLACEHOLDERS
from .base import TemplateError

PLACEHOLDER_PATTERN = re.compile(r"\$\{(" + "|".join(TEMPLATE_PLACEHOLDERS) + r")\}")


def find_checksum(checksums_file: Path, version: str) -> str:
    """
    从校验和清单中查找指定版本对应的行

    清单格式与 sha256sum 输出一致: "<sha256>  traefik-<版本>.tar.gz"

    Args:
        checksums_file: 校验和清单路径
        version: 版本号

    Returns:
        str: 匹配到的完整校验和行

    Raises:
        TemplateError: 清单不存在或没有匹配的版本时抛出
    """
    if not checksums_file.exists():
        raise TemplateError(ERROR_MESSAGES["file_not_found"].format("校验和清单", checksums_file))

    suffix = f" {IMAGE_NAME}-{version}.tar.gz"
    with open(checksums_file, "r", encoding="utf-8") as f:
        for line in f:
            line = line.rstrip("\r\n")
            if not line or line.startswith("#"):
                continue
            if line.endswith(suffix):
                return line

    raise TemplateError(ERROR_MESSAGES["checksum_not_found"].format(checksums_file.name, version))


def render_template(template_file: Path, values: Dict[str, str]) -> str:
    """
    替换Dockerfile模板中的 ${占位符}

    Args:
        template_file: 模板文件路径
        values: 占位符名称到替换值的映射

    Returns:
        str: 替换后的Dockerfile内容

    Raises:
        TemplateError: 模板不存在或有占位符没有对应值时抛出
    """
    if not template_file.exists():
        raise TemplateError(ERROR_MESSAGES["file_not_found"].format("Dockerfile模板", template_file))

    content = template_file.read_text(encoding="utf-8")

    missing = sorted({name for name in PLACEHOLDER_PATTERN.findall(content) if name not in values})
    if missing:
        raise TemplateError(ERROR_MESSAGES["placeholder_unresolved"].format(", ".join(missing)))

    return PLACEHOLDER_PATTERN.sub(lambda match: values[match.group(1)], content)


def create_build_context(resource_dir: Path, values: Dict[str, str]) -> Path:
    """
    在新建的临时目录中生成构建上下文

    临时目录不会被自动删除。

    Args:
        resource_dir: 模板和入口脚本所在目录
        values: 模板占位符的替换值

    Returns:
        Path: 构建上下文目录

    Raises:
        TemplateError: 模板或入口脚本不存在时抛出
    """
    dockerfile = render_template(resource_dir / DEFAULT_FILES["dockerfile"], values)

    entrypoint = resource_dir / DEFAULT_FILES["entrypoint"]
    if not entrypoint.exists():
        raise TemplateError(ERROR_MESSAGES["file_not_found"].format("入口脚本", entrypoint))

    context_dir = Path(tempfile.mkdtemp(prefix=f"{IMAGE_NAME}."))
    (context_dir / DEFAULT_FILES["dockerfile"]).write_text(dockerfile, encoding="utf-8")

    # 复制必需的构建文件
    target = context_dir / DEFAULT_FILES["entrypoint"]
    shutil.copyfile(entrypoint, target)
    os.chmod(target, 0o755)

    logger.debug(f"构建上下文已生成: {context_dir}")
    return context_dir

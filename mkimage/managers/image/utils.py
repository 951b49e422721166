"""镜像管理工具函数"""

from typing import Tuple

from ...constants import ERROR_MESSAGES, RESERVED_TAGS
from .base import ImageReference, InvalidTagError, Version


def parse_version(version: str) -> Version:
    """
    解析版本号字符串，格式为 MAJOR.MINOR.PATCH[-SUFFIX]

    不含 "." 的输入整体视为major，minor和patch为空。
    patch在其后第一个 "." 或 "-" 处截断。

    Args:
        version: 版本号字符串

    Returns:
        Version: 版本号各部分
    """
    major, _, rest = version.partition(".")
    minor, _, patch = rest.partition(".")
    for delimiter in (".", "-"):
        patch = patch.split(delimiter, 1)[0]
    return {"major": major, "minor": minor, "patch": patch}


def parse_image_reference(reference: str) -> ImageReference:
    """
    解析镜像引用，分离仓库名、镜像名和标签

    Args:
        reference: 镜像引用，格式为 "[仓库/]镜像[:标签]"

    Returns:
        ImageReference: 仓库名、镜像名和标签，缺失的部分为空字符串
    """
    repository, slash, remainder = reference.partition("/")
    if not slash:
        repository, remainder = "", reference
    image, _, tag = remainder.partition(":")
    return {"repository": repository, "image": image, "tag": tag}


def get_build_base(reference: ImageReference) -> str:
    """获取不带标签的镜像名"""
    if reference["repository"]:
        return f"{reference['repository']}/{reference['image']}"
    return reference["image"]


def get_build_name(reference: ImageReference) -> str:
    """获取完整的镜像构建名，格式为 build_base:tag"""
    return f"{get_build_base(reference)}:{reference['tag']}"


def get_extra_tags(reference: ImageReference, latest: bool, edge: bool) -> Tuple[str, ...]:
    """
    获取构建成功后需要额外添加的标签

    Args:
        reference: 镜像引用
        latest: 是否添加latest标签
        edge: 是否添加edge标签

    Returns:
        Tuple[str, ...]: 完整的额外镜像名
    """
    build_base = get_build_base(reference)
    flags = {"latest": latest, "edge": edge}
    return tuple(f"{build_base}:{tag}" for tag in RESERVED_TAGS if flags[tag])


def validate_tag(reference: ImageReference) -> None:
    """
    验证通过 --tag 指定的版本标签

    Args:
        reference: 镜像引用

    Raises:
        InvalidTagError: 标签为空或为保留标签时抛出
    """
    tag = reference["tag"]
    if not tag:
        raise InvalidTagError(ERROR_MESSAGES["tag_empty"].format(get_build_base(reference)))
    if tag in RESERVED_TAGS:
        raise InvalidTagError(ERROR_MESSAGES["tag_reserved"].format(tag))

"""Docker镜像构建相关功能模块

该子包包含镜像构建相关的各个功能模块，如引用解析、模板生成、构建和标签管理等。
"""

from .base import (
    EngineVersion,
    ImageBuildError,
    ImageReference,
    InvalidTagError,
    TemplateError,
    Version,
)
from .build import ImageBuilder
from .tag import ImageTagger
from .template import create_build_context, find_checksum, render_template
from .utils import (
    get_build_base,
    get_build_name,
    get_extra_tags,
    parse_image_reference,
    parse_version,
    validate_tag,
)

__all__ = [
    "EngineVersion",
    "ImageBuildError",
    "ImageReference",
    "InvalidTagError",
    "TemplateError",
    "Version",
    "ImageBuilder",
    "ImageTagger",
    "create_build_context",
    "find_checksum",
    "render_template",
    "get_build_base",
    "get_build_name",
    "get_extra_tags",
    "parse_image_reference",
    "parse_version",
    "validate_tag",
]

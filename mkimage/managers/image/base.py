"""镜像构建基础类型定义"""

from typing import TypedDict


class ImageBuildError(Exception):
    """镜像构建错误"""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


class InvalidTagError(Exception):
    """镜像标签错误"""
    pass


class TemplateError(Exception):
    """Dockerfile模板错误"""
    pass


class Version(TypedDict):
    """版本号类型，各部分均为原始字符串"""
    major: str
    minor: str
    patch: str


class EngineVersion(TypedDict):
    """Docker引擎版本类型"""
    major: int
    minor: int
    patch: str


class ImageReference(TypedDict):
    """镜像引用类型，格式为 [仓库/]镜像[:标签]"""
    repository: str
    image: str
    tag: str

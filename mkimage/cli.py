"""CLI命令行接口模块"""

import sys
from typing import Optional

import typer
from loguru import logger

from mkimage import setup_logger
from mkimage.constants import ERROR_MESSAGES, USAGE
from mkimage.managers.base_manager import DockerNotFoundError
from mkimage.managers.config_manager import ConfigError, ConfigManager
from mkimage.managers.image.base import ImageBuildError, InvalidTagError, TemplateError
from mkimage.managers.image.utils import get_build_name, parse_image_reference, validate_tag
from mkimage.managers.image_manager import ImageManager
from mkimage.managers.prerequisite_manager import (
    BaseImageNotFoundError,
    DockerVersionError,
    PrerequisiteChecker,
)

# 参数解析错误的退出码
USAGE_ERROR_EXIT_CODE = 2

BUILD_ERRORS = (
    InvalidTagError,
    ConfigError,
    DockerNotFoundError,
    DockerVersionError,
    BaseImageNotFoundError,
    TemplateError,
    ImageBuildError,
)

# 创建CLI应用
app = typer.Typer(
    help="Traefik基础镜像构建工具",
    add_completion=False,
    context_settings={"help_option_names": []},
)


def show_usage(value: bool) -> None:
    """显示使用说明并以非零状态退出"""
    if value:
        typer.echo(USAGE, err=True)
        raise typer.Exit(1)


@app.command()
def build(
    tag: Optional[str] = typer.Option(None, "-t", "--tag", help="镜像标签，格式为 仓库/镜像:版本"),
    latest: bool = typer.Option(False, "-l", "--latest", help="额外添加latest标签"),
    edge: bool = typer.Option(False, "-e", "--edge", help="额外添加edge标签"),
    help_: bool = typer.Option(False, "-h", "--help", callback=show_usage, is_eager=True, help="显示使用说明"),
):
    """构建Traefik基础镜像"""
    if not tag:
        logger.error(f"错误：{ERROR_MESSAGES['tag_missing']}")
        typer.echo(USAGE, err=True)
        raise typer.Exit(1)

    try:
        # 先校验标签，避免无效标签触发任何构建
        reference = parse_image_reference(tag)
        validate_tag(reference)

        settings = ConfigManager().load_settings()
        setup_logger(settings["log_level"])

        # 检查依赖
        checker = PrerequisiteChecker(settings["base_image"], settings["golang_image"])
        checker.check_all()

        # 构建镜像
        image_manager = ImageManager(settings, docker_client=checker.docker_client)
        images = image_manager.build_image(reference, latest=latest, edge=edge)
    except BUILD_ERRORS as e:
        logger.error(f"错误：{e}")
        raise typer.Exit(1)
    except Exception as e:
        logger.error(f"构建 {tag} 时发生未知错误：{e}")
        raise typer.Exit(1)

    logger.success(f"镜像 {get_build_name(reference)} 构建完成")
    for image in images:
        logger.info(f"  - {image}")


def main():
    """主入口函数"""
    try:
        app()
    except SystemExit as e:
        exit_code = e.code
        # 参数错误时typer已输出错误原因，这里补充使用说明并统一以1退出
        if exit_code == USAGE_ERROR_EXIT_CODE:
            typer.echo(USAGE, err=True)
            exit_code = 1
        sys.exit(exit_code)


if __name__ == "__main__":
    main()

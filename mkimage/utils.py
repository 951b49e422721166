"""工具函数模块"""

import shutil
import subprocess
from typing import List, Tuple

from loguru import logger


def command_exists(command: str) -> bool:
    """
    检查命令是否存在于PATH中

    Args:
        command: 命令名称

    Returns:
        bool: 命令是否存在
    """
    return shutil.which(command) is not None


def run_command(args: List[str], check: bool = True) -> Tuple[int, str, str]:
    """
    运行命令并返回结果

    Args:
        args: 命令及其参数
        check: 是否检查返回码

    Returns:
        (返回码, 标准输出, 标准错误)

    Raises:
        subprocess.CalledProcessError: check为True且返回码非零时抛出
    """
    logger.debug(f"执行命令: {' '.join(args)}")

    process = subprocess.run(args, capture_output=True, text=True)

    # 检查返回码
    if check and process.returncode != 0:
        logger.error(f"命令执行失败: {' '.join(args)}")
        logger.error(f"错误输出: {process.stderr}")
        raise subprocess.CalledProcessError(process.returncode, args, process.stdout, process.stderr)

    return process.returncode, process.stdout, process.stderr

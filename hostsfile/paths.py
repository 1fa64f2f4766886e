"""
默认 hosts 文件路径
"""

import ntpath
import os
from typing import Optional

WINDOWS_DEFAULT_ROOT = "C:\\Windows"
POSIX_HOSTS_PATH = "/etc/hosts"


def default_hosts_path(
    os_name: Optional[str] = None,
    system_root: Optional[str] = None
) -> str:
    """
    根据操作系统类型返回默认 hosts 文件路径

    - Windows: <SystemRoot>\\System32\\drivers\\etc\\hosts
    - 其他系统: /etc/hosts

    参数:
        os_name: os.name 风格的系统类型（默认: 当前系统）
        system_root: Windows 根目录（默认: SystemRoot 环境变量或 C:\\Windows）

    返回:
        hosts 文件路径
    """
    if os_name is None:
        os_name = os.name

    if os_name != "nt":
        return POSIX_HOSTS_PATH

    if system_root is None:
        system_root = os.environ.get("SystemRoot") or WINDOWS_DEFAULT_ROOT

    return ntpath.join(system_root, "System32", "drivers", "etc", "hosts")

"""
Hosts 文件读写模块，支持原子性更新
"""

import errno
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import List, Optional, Sequence

from hostsfile.codec import parse, serialize
from hostsfile.models import Line
from hostsfile.paths import default_hosts_path

DEFAULT_FILE_MODE = 0o644


class HostsFile:
    """
    绑定到单个 hosts 文件的读写器

    路径和编码在实例生命周期内不可变。
    写入使用原子性文件操作（临时文件 + 重命名）防止文件损坏。
    不检测读写之间的外部修改（最后写入者生效）。
    """

    def __init__(
        self,
        path: Optional[str] = None,
        encoding: str = "utf-8",
        logger: Optional[logging.Logger] = None
    ):
        """
        初始化 hosts 文件读写器

        参数:
            path: hosts 文件路径（默认: 当前系统的默认路径）
            encoding: 读写编码
            logger: 日志记录器实例
        """
        self._path = Path(path if path is not None else default_hosts_path())
        self._encoding = encoding
        self.logger = logger or logging.getLogger("hostsfile")
        self.lines: List[Line] = []

    @property
    def path(self) -> Path:
        return self._path

    @property
    def encoding(self) -> str:
        return self._encoding

    def read(self) -> List[Line]:
        """
        读取并解析 hosts 文件

        返回:
            解析后的行记录列表，同时保存到 lines

        异常:
            OSError: 文件不存在、权限不足等，原样抛出
        """
        try:
            # newline='' 保留 \r\n，由解析器统一处理；无法解码的字节替换为 U+FFFD
            with open(self._path, "r", encoding=self._encoding, errors="replace", newline="") as f:
                content = f.read()
        except PermissionError:
            self.logger.error(f"读取 hosts 文件权限被拒绝: {self._path}")
            raise
        except OSError as e:
            self.logger.error(f"读取 hosts 文件时出错: {e}")
            raise

        self.lines = parse(content)
        self.logger.debug(f"已读取 {len(self.lines)} 行: {self._path}")
        return self.lines

    def write(self, lines: Optional[Sequence[Line]] = None) -> None:
        """
        序列化并原子性写入 hosts 文件，完全替换原有内容

        参数:
            lines: 要写入的行记录；省略时写入 lines

        异常:
            PermissionError: 如果没有写入 hosts 文件的权限
            OSError: 如果文件系统操作失败
        """
        to_write = list(self.lines if lines is None else lines)
        content = serialize(to_write)

        # 符号链接写入其指向的文件，而不是替换链接本身
        target = self._path.resolve()

        try:
            try:
                mode = stat.S_IMODE(target.stat().st_mode)
            except FileNotFoundError:
                mode = DEFAULT_FILE_MODE

            # 写入临时文件（与目标文件同一目录）
            temp_fd, temp_path = tempfile.mkstemp(
                dir=target.parent,
                prefix=".hosts.tmp.",
                text=True
            )

            try:
                with os.fdopen(temp_fd, "w", encoding=self._encoding, newline="") as f:
                    f.write(content)

                # mkstemp 创建的文件权限为 0600，恢复原文件权限
                os.chmod(temp_path, mode)

                try:
                    # 原子性替换（同一文件系统内有效）
                    os.replace(temp_path, target)
                except OSError as e:
                    if e.errno != errno.EBUSY:
                        raise
                    # 挂载点（如 Docker bind mount 的 /etc/hosts）无法替换，改为原地覆盖
                    self.logger.warning(f"无法原子性替换 {target}，改为直接写入")
                    with open(target, "w", encoding=self._encoding, newline="") as f:
                        f.write(content)
                    os.unlink(temp_path)

            except Exception:
                # 出错时清理临时文件
                if os.path.exists(temp_path):
                    os.unlink(temp_path)
                raise

        except PermissionError:
            self.logger.error(f"写入 hosts 文件权限被拒绝: {self._path}")
            raise
        except OSError as e:
            self.logger.error(f"写入 hosts 文件失败: {e}")
            raise

        self.lines = to_write
        self.logger.debug(f"已写入 {len(to_write)} 行: {self._path}")

"""
Hosts 编辑器主应用模块
"""

import logging
import sys
from typing import List, Optional

from hostsfile.config import Config
from hostsfile.entries import add_entry, get_entries, remove_entry
from hostsfile.hosts_manager import HostsFile
from hostsfile.models import Entry, Line

LOGGER_NAME = "hostsfile"


def setup_logging(log_level: str) -> logging.Logger:
    """
    配置日志系统

    参数:
        log_level: 日志级别名称

    返回:
        配置好的日志记录器实例
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)

    # 避免重复的处理器，已有处理器同步更新级别
    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(log_level)
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)

    # 格式: 时间戳 - 名称 - 级别 - 消息
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)
    return logger


class HostsEditor:
    """
    应用控制器，协调读取、修改和写回

    每个命令都是一次完整的 读取 -> 修改 -> 写入 周期。
    结果与当前内容相同时不写文件。
    """

    def __init__(self, config: Config, logger: Optional[logging.Logger] = None):
        """
        初始化编辑器

        参数:
            config: 应用配置
            logger: 日志记录器实例（默认: 按配置创建）

        异常:
            ValueError: 如果配置无效
        """
        self.config = config
        self.config.validate()

        self.logger = logger or setup_logging(config.log_level)
        self.hosts_file = HostsFile(
            config.hosts_file_path,
            encoding=config.encoding,
            logger=self.logger
        )

    def list_entries(self) -> List[Entry]:
        """读取 hosts 文件并返回所有条目"""
        return get_entries(self.hosts_file.read())

    def add(self, ip: str, *hostnames: str) -> bool:
        """
        添加或合并条目并写回

        返回:
            文件是否被修改
        """
        current = self.hosts_file.read()
        updated = add_entry(current, ip, *hostnames)

        if not self._commit(current, updated):
            self.logger.info(f"无需修改: {ip} 已包含 {', '.join(hostnames)}")
            return False

        self.logger.info(f"已添加主机记录: {ip} → {', '.join(hostnames)}")
        return True

    def remove(self, ip_or_hostname: str) -> bool:
        """
        按 IP 或主机名移除条目并写回

        返回:
            文件是否被修改
        """
        current = self.hosts_file.read()
        updated = remove_entry(current, ip_or_hostname)

        if not self._commit(current, updated):
            self.logger.info(f"没有匹配的条目: {ip_or_hostname}")
            return False

        self.logger.info(f"已移除主机记录: {ip_or_hostname}")
        return True

    def _commit(self, current: List[Line], updated: List[Line]) -> bool:
        if updated == current:
            return False

        self.hosts_file.write(updated)
        return True

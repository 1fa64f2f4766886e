"""
配置管理模块，支持环境变量
"""

import codecs
import os
from dataclasses import dataclass, field

from hostsfile.paths import default_hosts_path


@dataclass
class Config:
    """应用配置类，从环境变量加载配置"""

    hosts_file_path: str = field(default_factory=default_hosts_path)
    encoding: str = "utf-8"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """
        从环境变量加载配置

        环境变量说明:
            HOSTS_FILE: hosts 文件路径 (默认: 当前系统的默认路径)
            HOSTS_ENCODING: 读写编码 (默认: utf-8)
            LOG_LEVEL: 日志级别 (默认: INFO)
        """
        return cls(
            hosts_file_path=os.getenv("HOSTS_FILE") or default_hosts_path(),
            encoding=os.getenv("HOSTS_ENCODING", "utf-8"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper()
        )

    def validate(self) -> None:
        """验证配置是否有效"""
        valid_log_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.log_level not in valid_log_levels:
            raise ValueError(
                f"无效的 LOG_LEVEL: {self.log_level}. "
                f"必须是以下之一: {', '.join(sorted(valid_log_levels))}"
            )

        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"无效的 HOSTS_ENCODING: {self.encoding}") from None

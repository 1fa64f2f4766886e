"""
Hosts 文件行模型

每条记录对应 hosts 文件中的一个物理行，三种类型互斥：
Entry（解析条目）、Comment（整行注释）、Empty（空行）。
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Entry:
    """
    代表 hosts 文件中的单个解析条目

    属性:
        ip: 第一个空白分隔的标记，不做格式校验
        hostnames: 映射到该 IP 的主机名（至少一个）
        comment: 行内注释（# 之后的文本），没有则为 None
    """

    ip: str
    hostnames: Tuple[str, ...]
    comment: Optional[str] = None

    def __post_init__(self) -> None:
        # 允许传入列表，统一存为元组以保持不可变
        object.__setattr__(self, "hostnames", tuple(self.hostnames))
        if not self.hostnames:
            raise ValueError(f"条目 {self.ip} 至少需要一个主机名")

    def to_hosts_line(self) -> str:
        """
        转换为 hosts 文件行格式

        格式: <IP>\t<主机名>...[\t# <注释>]

        返回:
            格式化的 hosts 文件行
        """
        main = "\t".join((self.ip,) + self.hostnames)
        if self.comment is None:
            return main
        if not self.comment:
            return f"{main}\t#"
        return f"{main}\t# {self.comment}"

    def __str__(self) -> str:
        return f"{self.ip} -> {', '.join(self.hostnames)}"


@dataclass(frozen=True)
class Comment:
    """整行注释，text 不包含 # 标记及其后的前导空白"""

    text: str = ""

    def to_hosts_line(self) -> str:
        return f"# {self.text}" if self.text else "#"


@dataclass(frozen=True)
class Empty:
    """空行"""

    def to_hosts_line(self) -> str:
        return ""


Line = Union[Entry, Comment, Empty]

"""
Hosts 文件解析与序列化模块
"""

import re
from typing import Iterable, List

from hostsfile.models import Comment, Empty, Entry, Line

LINE_BREAK = re.compile(r"\r?\n")
COMMENT_MARKER = "#"


def parse_line(raw: str) -> Line:
    """
    将单个物理行解析为行记录

    解析从不失败：无法识别为条目的内容降级为 Comment 或 Empty。

    参数:
        raw: 不含换行符的原始行

    返回:
        Entry、Comment 或 Empty
    """
    trimmed = raw.rstrip()
    if not trimmed:
        return Empty()

    comment_start = trimmed.find(COMMENT_MARKER)
    if comment_start == 0:
        return Comment(trimmed[1:].lstrip())

    if comment_start > 0:
        data_part = trimmed[:comment_start].rstrip()
        inline_comment = trimmed[comment_start + 1:].lstrip()
    else:
        data_part = trimmed
        inline_comment = None

    tokens = data_part.split()
    if not tokens:
        return Comment(inline_comment or "")

    ip, hostnames = tokens[0], tokens[1:]
    if not hostnames:
        # 只有 IP 没有主机名，保留原文作为注释
        return Comment(trimmed)

    return Entry(ip=ip, hostnames=tuple(hostnames), comment=inline_comment)


def parse(content: str) -> List[Line]:
    """
    将 hosts 文件内容解析为有序的行记录列表

    同时识别 LF 和 CRLF 换行。空字符串得到单个 Empty。

    参数:
        content: hosts 文件的完整文本

    返回:
        与源文本行一一对应的行记录列表
    """
    return [parse_line(raw) for raw in LINE_BREAK.split(content)]


def serialize(lines: Iterable[Line]) -> str:
    """
    将行记录序列化为 hosts 文件文本

    条目字段使用制表符连接，行之间以单个换行符分隔，不追加结尾换行。
    """
    return "\n".join(line.to_hosts_line() for line in lines)

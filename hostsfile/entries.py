"""
条目操作模块

所有函数都是纯函数：返回新的行列表，从不修改输入。
"""

from dataclasses import replace
from typing import Hashable, Iterable, List, Optional, Sequence, TypeVar

from hostsfile.models import Entry, Line

T = TypeVar("T", bound=Hashable)


def unique(items: Iterable[T]) -> List[T]:
    """按首次出现的顺序去重"""
    return list(dict.fromkeys(items))


def get_entries(lines: Sequence[Line]) -> List[Entry]:
    """
    返回所有条目行，保持原始顺序

    参数:
        lines: 行记录列表

    返回:
        Entry 列表（不含注释和空行）
    """
    return [line for line in lines if isinstance(line, Entry)]


def find_entries(lines: Sequence[Line], ip_or_hostname: str) -> List[Entry]:
    """返回 IP 相等或主机名包含该参数的条目"""
    return [
        entry for entry in get_entries(lines)
        if entry.ip == ip_or_hostname or ip_or_hostname in entry.hostnames
    ]


def _last_entry_index(lines: Sequence[Line]) -> Optional[int]:
    for index in range(len(lines) - 1, -1, -1):
        if isinstance(lines[index], Entry):
            return index
    return None


def add_entry(lines: Sequence[Line], ip: str, *hostnames: str) -> List[Line]:
    """
    添加或合并条目

    如果已存在相同 IP 的条目，只更新第一个：追加其中尚未出现的主机名，
    位置和注释保持不变。否则在最后一个条目之后插入新条目；
    没有任何条目时追加到末尾。

    参数:
        lines: 行记录列表
        ip: 目标 IP（精确字符串匹配）
        hostnames: 要添加的主机名，重复项会被忽略

    返回:
        新的行记录列表
    """
    new_hostnames = unique(hostnames)
    updated = list(lines)

    for index, line in enumerate(updated):
        if isinstance(line, Entry) and line.ip == ip:
            merged = unique(line.hostnames + tuple(new_hostnames))
            updated[index] = replace(line, hostnames=tuple(merged))
            return updated

    if not new_hostnames:
        # 没有主机名无法构成条目
        return updated

    last = _last_entry_index(updated)
    insert_at = len(updated) if last is None else last + 1
    updated.insert(insert_at, Entry(ip=ip, hostnames=tuple(new_hostnames)))
    return updated


def remove_entry(lines: Sequence[Line], ip_or_hostname: str) -> List[Line]:
    """
    按 IP 或主机名移除条目

    对每个条目依次判断：IP 匹配则删除整行；否则若主机名匹配，
    只移除该主机名，主机名为空时删除整行。其他行原样保留。
    没有匹配时结果与输入相同。

    参数:
        lines: 行记录列表
        ip_or_hostname: IP 或主机名

    返回:
        新的行记录列表
    """
    result: List[Line] = []

    for line in lines:
        if not isinstance(line, Entry):
            result.append(line)
            continue

        if line.ip == ip_or_hostname:
            continue

        if ip_or_hostname in line.hostnames:
            remaining = tuple(h for h in line.hostnames if h != ip_or_hostname)
            if remaining:
                result.append(replace(line, hostnames=remaining))
            continue

        result.append(line)

    return result

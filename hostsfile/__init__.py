"""
hostsfile - 解析、查询和修改操作系统 hosts 文件
"""

__version__ = "1.0.0"
__author__ = "hostsfile Project"

from hostsfile.app import HostsEditor
from hostsfile.codec import parse, serialize
from hostsfile.config import Config
from hostsfile.entries import add_entry, find_entries, get_entries, remove_entry
from hostsfile.hosts_manager import HostsFile
from hostsfile.models import Comment, Empty, Entry, Line
from hostsfile.paths import default_hosts_path

__all__ = [
    "HostsEditor",
    "HostsFile",
    "Config",
    "Entry",
    "Comment",
    "Empty",
    "Line",
    "parse",
    "serialize",
    "get_entries",
    "find_entries",
    "add_entry",
    "remove_entry",
    "default_hosts_path",
]

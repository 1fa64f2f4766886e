"""
命令行接口模块

查看和修改操作系统的 hosts 文件。
"""

import argparse
import sys
from typing import List, Optional

from hostsfile.app import HostsEditor
from hostsfile.config import Config


def build_parser() -> argparse.ArgumentParser:
    """构建命令行参数解析器"""
    parser = argparse.ArgumentParser(
        prog="hostsfile",
        description="查看和修改 hosts 文件"
    )
    parser.add_argument("--file", help="hosts 文件路径 (默认: HOSTS_FILE 或系统默认路径)")
    parser.add_argument("--encoding", help="读写编码 (默认: HOSTS_ENCODING 或 utf-8)")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("list", help="列出所有条目")
    commands.add_parser("path", help="显示 hosts 文件路径")

    add = commands.add_parser("add", help="添加条目或向已有 IP 追加主机名")
    add.add_argument("ip")
    add.add_argument("hostnames", nargs="+")

    remove = commands.add_parser("remove", help="按 IP 或主机名移除条目")
    remove.add_argument("target")

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """主入口点"""
    args = build_parser().parse_args(argv)

    # 从环境变量加载配置，命令行参数优先
    config = Config.from_env()
    if args.file:
        config.hosts_file_path = args.file
    if args.encoding:
        config.encoding = args.encoding

    try:
        editor = HostsEditor(config)
    except Exception as e:
        print(f"初始化失败: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        if args.command == "path":
            print(editor.hosts_file.path)
        elif args.command == "list":
            for entry in editor.list_entries():
                print(entry.to_hosts_line())
        elif args.command == "add":
            editor.add(args.ip, *args.hostnames)
        elif args.command == "remove":
            editor.remove(args.target)
    except KeyboardInterrupt:
        editor.logger.info("被用户中断")
        sys.exit(130)
    except Exception as e:
        editor.logger.error(f"致命错误: {e}", exc_info=True)
        sys.exit(1)


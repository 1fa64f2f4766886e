#!/usr/bin/env python3
"""
hostsfile - 主入口点

查看和修改操作系统的 hosts 文件。
"""

import sys
from pathlib import Path

# 将当前目录添加到路径以导入 hostsfile 模块
sys.path.insert(0, str(Path(__file__).parent))

from hostsfile.cli import main


if __name__ == '__main__':
    main()

"""python -m hostsfile 入口"""

from hostsfile.cli import main

main()

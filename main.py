#!/usr/bin/env python3
"""
迷宮連通分量工具

主程式進入點

使用方法:
    uv run main.py maze.png
"""

import sys

from maze_tools.cli import main


if __name__ == "__main__":
    sys.exit(main())

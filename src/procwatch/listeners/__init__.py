"""Listeners 模块

- base: ExecutionListener 基类、ListenerChain
- live: LiveConsoleListener（全量重绘）
- changelog: ChangeLogListener（增量输出）
"""

from .base import ExecutionListener, ListenerChain, process_output_blocks
from .changelog import ChangeLogListener
from .live import LiveConsoleListener

__all__ = [
    "ExecutionListener",
    "ListenerChain",
    "process_output_blocks",
    "LiveConsoleListener",
    "ChangeLogListener",
]

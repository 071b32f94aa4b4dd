"""监听器基类与调用链"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from rich.markup import escape

from .. import config
from ..render.normalizer import normalize_output

if TYPE_CHECKING:
    from ..task.types import Process, TaskGroup


class ExecutionListener(ABC):
    """执行监听器基类

    调度器每个轮询周期对每个已注册的监听器调用一次 on_tick。
    同一实例的 on_tick 不可并发调用。
    """

    def __init__(self, priority: int = config.DEFAULT_PRIORITY):
        self._priority = priority

    @property
    def priority(self) -> int:
        """优先级，越大越先被调用"""
        return self._priority

    @abstractmethod
    def on_tick(self, group: "TaskGroup") -> None:
        """报告任务组当前状态"""
        pass


class ListenerChain:
    """按优先级排序的监听器集合

    优先级高的先调用，相同优先级按注册顺序。
    """

    def __init__(self, listeners: Iterable[ExecutionListener] = ()):
        self._listeners: list[ExecutionListener] = list(listeners)

    def add(self, listener: ExecutionListener) -> None:
        self._listeners.append(listener)

    def remove(self, listener: ExecutionListener) -> None:
        self._listeners.remove(listener)

    def ordered(self) -> list[ExecutionListener]:
        # sorted() is stable, so equal priorities keep insertion order
        return sorted(self._listeners, key=lambda listener: -listener.priority)

    def dispatch(self, group: "TaskGroup") -> None:
        """把一次 tick 分发给所有监听器"""
        for listener in self.ordered():
            listener.on_tick(group)

    def __iter__(self) -> Iterator[ExecutionListener]:
        return iter(self.ordered())

    def __len__(self) -> int:
        return len(self._listeners)


def process_output_blocks(process: "Process", blank_after_each: bool) -> list[str]:
    """失败任务的输出区块

    非空 stdout/stderr 各生成一个带标题的区块，内容经过换行归一化并转义 markup。

    Args:
        process: 任务绑定的进程
        blank_after_each: 每个区块后是否追加空行
    """
    lines: list[str] = []
    for label, text in ((config.OUTPUT_LABEL, process.stdout), (config.ERROR_OUTPUT_LABEL, process.stderr)):
        if not text:
            continue
        lines.append(label)
        lines.append(escape(normalize_output(text)))
        if blank_after_each:
            lines.append("")
    return lines

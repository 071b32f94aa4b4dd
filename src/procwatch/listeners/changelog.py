"""增量变化监听器

不刷新已有内容，只追加状态发生变化的任务行。
"""

from typing import TYPE_CHECKING

from rich.markup import escape

from .. import config
from ..render.console import ConsoleOutput
from ..render.snapshot import SnapshotTracker
from ..task.classifier import classify
from ..task.types import TaskStatus
from ..telemetry import format_group_log, get_logger, metrics
from .base import ExecutionListener, process_output_blocks

if TYPE_CHECKING:
    from ..task.types import Task, TaskGroup

logger = get_logger(__name__)


class ChangeLogListener(ExecutionListener):
    """增量变化监听器

    负责：
    - 与上一次快照比较，找出变化的任务
    - 为进入 running/successful/failed 的任务输出一行（idle 不输出）
    - 每次 tick 后整体替换快照
    """

    name = "changelog"

    def __init__(
        self,
        output: ConsoleOutput,
        configure_formatter: bool = True,
        priority: int = config.DEFAULT_PRIORITY,
    ):
        super().__init__(priority)
        self._output = output
        self._tracker = SnapshotTracker()

        if configure_formatter:
            output.configure_styles()

    @property
    def tracker(self) -> SnapshotTracker:
        return self._tracker

    def on_tick(self, group: "TaskGroup") -> None:
        buffer = self.collect_updates(group)
        if buffer:
            self._output.writeln(buffer)

        metrics.record_tick(self.name, len(buffer))
        if buffer:
            logger.debug(format_group_log("ChangeLog", group.group_id, f"{len(buffer)} lines"))

    def collect_updates(self, group: "TaskGroup") -> list[str]:
        """计算本次 tick 的输出行并更新快照（不写出）"""
        buffer: list[str] = []
        for task in self._tracker.changes(group):
            buffer.extend(self._describe(task))

        self._tracker.record(group)
        return buffer

    def _describe(self, task: "Task") -> list[str]:
        state = classify(task)
        if state is None:
            return []

        name = escape(task.name)
        if state.status == TaskStatus.RUNNING:
            return [f"{name} is [running]running[/running]"]
        if state.status == TaskStatus.SUCCEEDED:
            return [f"{name} is [success]successful[/success]"]
        if state.status == TaskStatus.FAILED:
            return [f"{name} has [error]failed[/error]"] + process_output_blocks(
                task.process, blank_after_each=True
            )
        return []

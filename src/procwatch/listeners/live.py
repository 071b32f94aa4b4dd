"""全量重绘监听器

每次 tick 重新渲染任务组的完整状态表和失败详情，并整体替换该组的区域。
"""

from typing import TYPE_CHECKING

from rich.markup import escape

from .. import config
from ..render.console import ConsoleOutput
from ..render.regions import RegionManager
from ..task.classifier import classify, status_markup
from ..telemetry import format_group_log, get_logger, metrics
from .base import ExecutionListener, process_output_blocks

if TYPE_CHECKING:
    from ..task.types import TaskGroup

logger = get_logger(__name__)


class LiveConsoleListener(ExecutionListener):
    """全量重绘监听器

    每个任务组一个独立区域，多组同时运行时互不覆盖。
    """

    name = "live"

    def __init__(
        self,
        output: ConsoleOutput,
        configure_formatter: bool = True,
        priority: int = config.DEFAULT_PRIORITY,
    ):
        """
        Args:
            output: 输出目标
            configure_formatter: 是否向 Console 注册默认状态样式；
                False 时由调用方负责样式
            priority: 监听器优先级
        """
        super().__init__(priority)
        self._output = output
        self._regions = RegionManager(output)

        if configure_formatter:
            output.configure_styles()

    @property
    def regions(self) -> RegionManager:
        return self._regions

    def on_tick(self, group: "TaskGroup") -> None:
        section = self._regions.get(group)
        frame = self.build_frame(group)
        section.overwrite(frame)

        metrics.record_tick(self.name, len(frame))
        logger.debug(format_group_log("LiveConsole", group.group_id, f"redrawn {len(frame)} lines"))

    def build_frame(self, group: "TaskGroup") -> list[str]:
        """构建一帧的 markup 行

        - 每个任务一行: <name> (<status>)
        - 一个空行
        - 每个失败任务: 错误行、输出区块、空行
        """
        buffer = [f"{escape(task.name)} ({status_markup(classify(task))})" for task in group]
        buffer.append("")

        for task in group.failed_tasks():
            buffer.append(
                f'[error]Task "{escape(task.name)}" failed (exit code: {task.state.exit_code}).[/error]'
            )
            buffer.extend(process_output_blocks(task.process, blank_after_each=False))
            buffer.append("")

        return buffer

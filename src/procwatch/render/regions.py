"""渲染区域管理

每个任务组对应一个独立的 ConsoleSection，按 group_id 惰性创建，
不同任务组互不覆盖。区域不会被主动销毁，数量以观察到的任务组数为上限。
"""

from typing import TYPE_CHECKING

from ..telemetry import format_group_log, get_logger, metrics
from .console import ConsoleOutput, ConsoleSection

if TYPE_CHECKING:
    from ..task.types import TaskGroup

logger = get_logger(__name__)


class RegionManager:
    """渲染区域管理器

    维护：
    - group_id → ConsoleSection 映射
    """

    def __init__(self, output: ConsoleOutput):
        self._output = output
        self._regions: dict[str, ConsoleSection] = {}

    def get(self, group: "TaskGroup") -> ConsoleSection:
        """获取任务组的区域，首次出现时创建"""
        group_id = group.group_id
        section = self._regions.get(group_id)
        if section is not None:
            return section

        section = self._output.section(name=group_id)
        self._regions[group_id] = section
        metrics.record_region(len(self._regions))
        logger.info(format_group_log("Regions", group_id, "section created"))
        return section

    def group_ids(self) -> list[str]:
        """已分配区域的 group_id（按创建顺序）"""
        return list(self._regions)

    def __contains__(self, group_id: str) -> bool:
        return group_id in self._regions

    def __len__(self) -> int:
        return len(self._regions)

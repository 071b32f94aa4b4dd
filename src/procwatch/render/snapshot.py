"""任务状态快照

按任务组记录每个位置上一次 tick 时的 (completed, running)，用于增量 diff。

快照按位置（下标）而不是任务本身索引：如果任务组在两次 tick 之间重排或
替换了某个位置的任务，该位置的历史会被当作同一个任务比较。
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..task.classifier import classify

if TYPE_CHECKING:
    from ..task.types import Task, TaskGroup


@dataclass(frozen=True)
class TaskSnapshot:
    """单个位置的状态快照"""

    completed: bool
    running: bool

    @classmethod
    def of(cls, task: "Task") -> "TaskSnapshot":
        state = classify(task)
        if state is None:
            return cls(completed=False, running=False)
        return cls(completed=state.completed, running=state.running)


class SnapshotTracker:
    """快照追踪器

    负责：
    - 保存每个任务组最近一次 tick 的快照
    - 计算当前任务组相对快照的变化
    """

    def __init__(self):
        self._entries: dict[str, list[TaskSnapshot]] = {}

    def previous(self, group: "TaskGroup") -> list[TaskSnapshot]:
        """上一次记录的快照，首次出现返回空列表"""
        return list(self._entries.get(group.group_id, []))

    def changes(self, group: "TaskGroup") -> list["Task"]:
        """变化候选任务（保持组内顺序）

        - 超出上次长度的位置：无条件视为变化
        - 其余位置：(completed, running) 与快照不同才视为变化
        """
        previous = self._entries.get(group.group_id, [])
        changed = []
        for index, task in enumerate(group):
            if index >= len(previous) or previous[index] != TaskSnapshot.of(task):
                changed.append(task)
        return changed

    def record(self, group: "TaskGroup") -> None:
        """用当前所有位置的状态替换快照"""
        self._entries[group.group_id] = [TaskSnapshot.of(task) for task in group]

    def __contains__(self, group_id: str) -> bool:
        return group_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

"""Task 模块

- types: TaskStatus, TaskState, Process, CapturedProcess, Task, TaskGroup
- classifier: 状态分类与标签
"""

from .classifier import classify, status_label, status_markup
from .types import CapturedProcess, Process, Task, TaskGroup, TaskState, TaskStatus

__all__ = [
    # Types
    "TaskStatus",
    "TaskState",
    "Process",
    "CapturedProcess",
    "Task",
    "TaskGroup",
    # Classifier
    "classify",
    "status_label",
    "status_markup",
]

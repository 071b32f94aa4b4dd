"""Task 模块数据类型定义

包含：
- TaskStatus: 任务状态枚举
- TaskState: 单一标签状态值 (status, exit_code)
- Process: 外部进程协议
- CapturedProcess: 已捕获进程状态的简单实现
- Task / TaskGroup: 任务与任务组
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from ..core.ids import new_group_id


class TaskStatus(Enum):
    """任务状态枚举

    状态设计（4 个）：
    - IDLE: 尚未启动
    - RUNNING: 执行中
    - SUCCEEDED: 退出码为 0
    - FAILED: 退出码非 0
    """

    IDLE = "idle"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    @property
    def completed(self) -> bool:
        """是否已结束（成功或失败）"""
        return self in {TaskStatus.SUCCEEDED, TaskStatus.FAILED}

    @property
    def style(self) -> str:
        """状态对应的语义样式标签"""
        styles = {
            TaskStatus.IDLE: "idle",
            TaskStatus.RUNNING: "running",
            TaskStatus.SUCCEEDED: "success",
            TaskStatus.FAILED: "error",
        }
        return styles[self]


@dataclass(frozen=True)
class TaskState:
    """任务状态值

    status 与 exit_code 一起构成单一标签值，FAILED 必定带退出码。
    """

    status: TaskStatus
    exit_code: int | None = None

    @property
    def completed(self) -> bool:
        return self.status.completed

    @property
    def running(self) -> bool:
        return self.status == TaskStatus.RUNNING

    @classmethod
    def from_process(cls, process: "Process") -> "TaskState":
        """从进程状态推导任务状态

        - running → RUNNING
        - 未运行且无退出码 → IDLE
        - 退出码 0 → SUCCEEDED
        - 其他退出码 → FAILED(exit_code)
        """
        if process.running:
            return cls(TaskStatus.RUNNING)
        if process.exit_code is None:
            return cls(TaskStatus.IDLE)
        if process.exit_code == 0:
            return cls(TaskStatus.SUCCEEDED, 0)
        return cls(TaskStatus.FAILED, process.exit_code)


class Process(Protocol):
    """外部进程句柄（只读）"""

    @property
    def running(self) -> bool: ...

    @property
    def exit_code(self) -> int | None: ...

    @property
    def stdout(self) -> str: ...

    @property
    def stderr(self) -> str: ...


@dataclass
class CapturedProcess:
    """已捕获的进程状态

    调度器把真实进程的运行标志、退出码和输出拷贝进来；本类不管理进程生命周期。
    """

    running: bool = False
    exit_code: int | None = None
    stdout: str = ""
    stderr: str = ""

    def start(self) -> None:
        """标记进程开始运行"""
        self.running = True
        self.exit_code = None

    def finish(self, exit_code: int, stdout: str = "", stderr: str = "") -> None:
        """标记进程结束并记录输出"""
        self.running = False
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr


@dataclass
class Task:
    """绑定单个进程的命名任务"""

    name: str
    process: Process = field(default_factory=CapturedProcess)

    @property
    def state(self) -> TaskState:
        return TaskState.from_process(self.process)

    @property
    def completed(self) -> bool:
        return self.state.completed

    @property
    def running(self) -> bool:
        return self.state.running


class TaskGroup:
    """有序、下标稳定的任务组

    group_id 在创建时确定，作为监听器内部 map 的 key；同一批任务在多次
    tick 之间必须使用同一个 TaskGroup（或同一个 group_id）。
    """

    def __init__(self, tasks: Iterable[Task] = (), group_id: str | None = None):
        self.group_id = group_id or new_group_id()
        self._tasks: list[Task] = list(tasks)

    def add(self, task: Task) -> Task:
        """追加任务，返回该任务"""
        self._tasks.append(task)
        return task

    def failed_tasks(self) -> list[Task]:
        """当前处于 FAILED 状态的任务（保持原顺序）"""
        return [task for task in self._tasks if task.state.status == TaskStatus.FAILED]

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __getitem__(self, index: int) -> Task:
        return self._tasks[index]

    def __repr__(self) -> str:
        return f"TaskGroup(group_id={self.group_id!r}, tasks={len(self._tasks)})"

"""状态分类器：Task → 显示类别与标签"""

from rich.markup import escape

from .. import config
from .types import TaskState, TaskStatus


def classify(task: object) -> TaskState | None:
    """返回任务的单一标签状态

    无法识别的对象返回 None，由调用方渲染为兜底标签。
    """
    state = getattr(task, "state", None)
    if isinstance(state, TaskState):
        return state
    return None


def status_label(state: TaskState | None) -> str:
    """纯文本状态标签

    idle / running / success / failed (exit code: N)
    """
    if state is None:
        return config.UNKNOWN_STATUS_LABEL
    if state.status == TaskStatus.IDLE:
        return "idle"
    if state.status == TaskStatus.RUNNING:
        return "running"
    if state.status == TaskStatus.SUCCEEDED:
        return "success"
    if state.status == TaskStatus.FAILED:
        return f"failed (exit code: {state.exit_code})"
    return config.UNKNOWN_STATUS_LABEL


def status_markup(state: TaskState | None) -> str:
    """带语义样式标签的状态文本，例如 [error]failed (exit code: 1)[/error]"""
    label = escape(status_label(state))
    if state is None:
        return label
    tag = state.status.style
    return f"[{tag}]{label}[/{tag}]"

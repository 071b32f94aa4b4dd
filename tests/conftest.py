"""Pytest 配置"""

import io

import pytest
from rich.console import Console

from procwatch.render.console import ConsoleOutput
from procwatch.task.types import CapturedProcess, Task
from procwatch.telemetry import metrics


@pytest.fixture
def make_console():
    """工厂：创建写入内存的 Console"""

    def _make(terminal: bool = False, width: int = 80) -> Console:
        return Console(
            file=io.StringIO(),
            width=width,
            force_terminal=terminal,
            color_system=None,
            _environ={"TERM": "xterm-256color"},
        )

    return _make


@pytest.fixture
def make_task():
    """工厂：创建绑定 CapturedProcess 的任务"""

    def _make(
        name: str,
        running: bool = False,
        exit_code: int | None = None,
        stdout: str = "",
        stderr: str = "",
    ) -> Task:
        process = CapturedProcess(running=running, exit_code=exit_code, stdout=stdout, stderr=stderr)
        return Task(name, process)

    return _make


@pytest.fixture
def output(make_console):
    """非终端输出（section 重写退化为追加）"""
    return ConsoleOutput(make_console())


@pytest.fixture
def terminal_output(make_console):
    """终端输出（section 重写会发送光标控制）"""
    return ConsoleOutput(make_console(terminal=True))


@pytest.fixture(autouse=True)
def reset_metrics():
    """每次测试前重置指标"""
    metrics.reset()
    yield
    metrics.reset()

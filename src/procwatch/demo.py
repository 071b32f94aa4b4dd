"""Demo: 用模拟任务驱动监听器

模拟调度器：每个 tick 推进任务状态，再把任务组分发给监听器。
--static 使用 ChangeLogListener，默认使用 LiveConsoleListener。
"""

import argparse
import logging
import time
from dataclasses import dataclass

from rich.console import Console
from rich.logging import RichHandler

from procwatch import config
from procwatch.listeners import ChangeLogListener, ListenerChain, LiveConsoleListener
from procwatch.render import ConsoleOutput
from procwatch.task import CapturedProcess, Task, TaskGroup
from procwatch.telemetry import get_logger, metrics

logger = get_logger(__name__)


@dataclass
class DemoJob:
    """模拟任务脚本：第 start 个 tick 启动，运行 duration 个 tick 后结束"""

    name: str
    start: int
    duration: int
    exit_code: int = 0
    stdout: str = ""
    stderr: str = ""


DEMO_JOBS = [
    DemoJob("lint", start=1, duration=2, stdout="All checks passed.\n"),
    DemoJob("build", start=1, duration=4),
    DemoJob("test", start=3, duration=3, exit_code=1, stdout="collected 12 items\r\n", stderr="AssertionError: boom\n"),
    DemoJob("docs", start=5, duration=2),
]


def advance(group: TaskGroup, jobs: list[DemoJob], tick: int) -> bool:
    """推进一个 tick，返回是否还有未结束的任务"""
    pending = False
    for task, job in zip(group, jobs):
        process = task.process
        if tick == job.start:
            process.start()
        elif tick == job.start + job.duration:
            process.finish(job.exit_code, job.stdout, job.stderr)
        if tick < job.start + job.duration:
            pending = True
    return pending


def run(
    static: bool = False,
    interval: float = config.POLL_INTERVAL,
    console: Console | None = None,
) -> None:
    """运行 demo"""
    output = ConsoleOutput(console or Console())
    listener_cls = ChangeLogListener if static else LiveConsoleListener
    chain = ListenerChain([listener_cls(output)])

    group = TaskGroup((Task(job.name, CapturedProcess()) for job in DEMO_JOBS), group_id="demo")

    tick = 0
    while True:
        pending = advance(group, DEMO_JOBS, tick)
        chain.dispatch(group)
        if not pending:
            break
        tick += 1
        time.sleep(interval)

    logger.info(f"[Demo] {metrics.summary()}")


def main():
    """入口函数"""
    parser = argparse.ArgumentParser(description="procwatch demo")
    parser.add_argument("--static", action="store_true", help="only print status changes")
    parser.add_argument("--interval", type=float, default=config.POLL_INTERVAL, help="seconds between ticks")
    args = parser.parse_args()

    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )

    try:
        run(static=args.static, interval=args.interval)
    except KeyboardInterrupt:
        print("\nDemo stopped")


if __name__ == "__main__":
    main()

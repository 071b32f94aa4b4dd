"""Telemetry - 日志与监听器指标

日志格式: [module:group] msg，group 为去掉 "group:" 前缀后的短 ID
指标: 每个监听器的 tick 数与输出行数、区域分配数、输出归一化失败数
"""

import logging
from collections import Counter

from procwatch import config
from procwatch.core.ids import short_id


def get_logger(name: str) -> logging.Logger:
    """获取模块 logger（通常传入 __name__）"""
    return logging.getLogger(name)


def format_group_log(module: str, group_id: str, msg: str) -> str:
    """格式化带任务组 ID 的日志消息

    Args:
        module: 组件名，如 "LiveConsole"
        group_id: 任务组 ID
        msg: 日志消息

    Returns:
        [module:short_id] msg；group_id 为空时用 "unknown"
    """
    group_short = short_id(group_id) if group_id else "unknown"
    return f"[{module}:{group_short}] {msg}"


class ListenerMetrics:
    """监听器指标

    - ticks / lines: 按监听器名统计
    - regions_created / regions_active: 区域分配情况
    - normalize_errors: 输出归一化失败次数

    config.METRICS_ENABLED 为 False 时不记录。
    """

    def __init__(self):
        self.ticks: Counter[str] = Counter()
        self.lines: Counter[str] = Counter()
        self.regions_created = 0
        self.regions_active = 0
        self.normalize_errors = 0

    def record_tick(self, listener: str, lines: int) -> None:
        """记录一次 tick 及其输出行数"""
        if not config.METRICS_ENABLED:
            return
        self.ticks[listener] += 1
        self.lines[listener] += lines

    def record_region(self, active: int) -> None:
        """记录新分配的区域，active 为当前区域总数"""
        if not config.METRICS_ENABLED:
            return
        self.regions_created += 1
        self.regions_active = active

    def record_normalize_error(self) -> None:
        if not config.METRICS_ENABLED:
            return
        self.normalize_errors += 1

    def summary(self) -> str:
        """单行摘要，用于退出时打日志"""
        per_listener = ", ".join(
            f"{name}: {self.ticks[name]} ticks/{self.lines[name]} lines" for name in sorted(self.ticks)
        )
        return (
            f"{per_listener or 'no ticks'}; regions={self.regions_created}; "
            f"normalize_errors={self.normalize_errors}"
        )

    def reset(self) -> None:
        self.ticks.clear()
        self.lines.clear()
        self.regions_created = 0
        self.regions_active = 0
        self.normalize_errors = 0


# 全局指标实例
metrics = ListenerMetrics()

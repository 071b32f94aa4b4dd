"""procwatch 配置

配置分为以下几类：
- 监听器配置：默认优先级
- 显示配置：状态样式、行分隔符
- 日志与指标配置
- Demo 配置：轮询间隔
"""

import os

# === 监听器配置 ===
DEFAULT_PRIORITY = 0  # 监听器默认优先级（越大越先被调用）

# === 显示配置 ===
LINE_SEPARATOR = os.linesep  # 进程输出归一化后的行分隔符

# 语义样式标签 → 颜色（configure_formatter=True 时注册到 Console）
STATUS_STYLES: dict[str, str] = {
    "error": "red",
    "success": "green",
    "idle": "blue",
    "running": "yellow",
}

UNKNOWN_STATUS_LABEL = "unknown process status"  # 无法识别状态时的兜底标签

# 区块标题
OUTPUT_LABEL = "Output:"
ERROR_OUTPUT_LABEL = "Error output:"

# === 日志配置 ===
LOG_LEVEL = os.environ.get("PROCWATCH_LOG_LEVEL", "INFO")  # 日志级别

# === 指标配置 ===
METRICS_ENABLED = True  # 是否启用指标收集

# === Demo 配置 ===
POLL_INTERVAL = 0.5  # demo 轮询间隔（秒）

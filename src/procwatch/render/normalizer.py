"""进程输出归一化

把捕获的 stdout/stderr 中混用的换行（\\r\\n, \\r, \\n）统一为本机行分隔符。
格式化失败时返回空串，渲染永远不会因为输出内容而中断。
"""

import re

from .. import config
from ..telemetry import get_logger, metrics

logger = get_logger(__name__)

_NEWLINE_RE = re.compile(r"\r\n|\r|\n")


def normalize_output(text: str) -> str:
    """统一换行符

    Args:
        text: 原始进程输出

    Returns:
        换行统一为 config.LINE_SEPARATOR 的文本；处理失败返回 ""
    """
    if not text:
        return ""
    try:
        return _NEWLINE_RE.sub(config.LINE_SEPARATOR, text)
    except Exception as e:
        logger.debug(f"[Normalizer] Failed to normalize output: {e}")
        metrics.record_normalize_error()
        return ""


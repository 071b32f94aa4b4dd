"""基于 Rich 的终端输出

ConsoleOutput 包装 rich Console，并分配 ConsoleSection：可清空、可原地重写的行块。
重写某个 section 时，擦除它及其后创建的所有 section，再在一次缓冲写入中重新打印，
观察者不会看到半帧。仅终端 Console 发送光标控制；非终端时重写退化为追加。
"""

import weakref

from rich.console import Console
from rich.control import Control
from rich.segment import ControlType
from rich.text import Text
from rich.theme import Theme

from .. import config
from ..telemetry import get_logger

logger = get_logger(__name__)

# 已注册状态样式的 Console
_styled_consoles: "weakref.WeakSet[Console]" = weakref.WeakSet()


def plain_text(line: str) -> str:
    """去掉一行中的 Rich markup"""
    return Text.from_markup(line, emoji=False).plain


def _erase_lines(count: int) -> Control:
    """光标上移 count 行并逐行擦除"""
    codes = [(ControlType.CURSOR_UP, 1), (ControlType.ERASE_IN_LINE, 2)] * count
    return Control(*codes, ControlType.CARRIAGE_RETURN)


class ConsoleSection:
    """ConsoleOutput 中可重写的行块"""

    def __init__(self, output: "ConsoleOutput", name: str):
        self._output = output
        self.name = name
        self._lines: list[str] = []
        self.height = 0  # 当前占用的终端行数

    @property
    def lines(self) -> list[str]:
        """当前显示的 markup 行"""
        return list(self._lines)

    @property
    def plain_lines(self) -> list[str]:
        """当前显示的纯文本行"""
        return [plain_text(line) for line in self._lines]

    def clear(self) -> None:
        """清空 section 内容"""
        self._output._rewrite(self, [])

    def overwrite(self, lines: list[str]) -> None:
        """用 lines 替换 section 内容"""
        self._output._rewrite(self, list(lines))

    def writeln(self, lines: list[str]) -> None:
        """向 section 追加 lines"""
        self._output._rewrite(self, self._lines + list(lines))

    def _set(self, lines: list[str]) -> None:
        self._lines = lines
        self.height = self._output.measure(lines)

    def __repr__(self) -> str:
        return f"ConsoleSection(name={self.name!r}, height={self.height})"


class ConsoleOutput:
    """监听器共享的终端输出

    负责：
    - 管理 section（按创建顺序自上而下排列）
    - 普通的顺序行输出
    - 注册状态语义样式（error/success/idle/running）
    """

    def __init__(self, console: Console | None = None):
        self.console = console or Console()
        self._sections: list[ConsoleSection] = []

    @property
    def styles_configured(self) -> bool:
        return self.console in _styled_consoles

    def configure_styles(self) -> bool:
        """向 Console 主题注册状态样式

        对同一 Console 幂等：多个监听器或多个包装同一 Console 的实例
        重复调用时只 push 一次主题。

        Returns:
            本次调用是否 push 了主题
        """
        if self.styles_configured:
            return False
        self.console.push_theme(Theme(config.STATUS_STYLES))
        _styled_consoles.add(self.console)
        logger.debug("[Console] Status styles registered")
        return True

    def section(self, name: str = "") -> ConsoleSection:
        """在所有已有 section 下方创建新 section"""
        section = ConsoleSection(self, name or f"section-{len(self._sections)}")
        self._sections.append(section)
        return section

    @property
    def sections(self) -> list[ConsoleSection]:
        return list(self._sections)

    def writeln(self, lines: list[str]) -> None:
        """一次缓冲写入打印 lines"""
        with self.console:
            for line in lines:
                self.console.print(line, highlight=False, emoji=False)

    def measure(self, lines: list[str]) -> int:
        """lines 在当前宽度下占用的终端行数"""
        width = self.console.width
        return sum(len(Text.from_markup(line, emoji=False).wrap(self.console, width)) for line in lines)

    def _rewrite(self, section: ConsoleSection, lines: list[str]) -> None:
        if not self.console.is_terminal:
            section._set(lines)
            self.writeln(lines)
            return

        index = self._sections.index(section)
        trailing = self._sections[index:]
        erase = sum(s.height for s in trailing)

        section._set(lines)
        with self.console:
            if erase:
                self.console.control(_erase_lines(erase))
            for s in trailing:
                for line in s._lines:
                    self.console.print(line, highlight=False, emoji=False)

"""
Console: 사용자 입력/출력 래퍼.

UI 상태(색상, 프롬프트)는 전역 변수가 아니라 UIConfig로 명시적으로 전달.
입력 함수는 주입 가능 (테스트에서는 스크립트된 입력 사용).
"""

import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import TextIO

from src.domain.constants import DEFAULT_PROMPT
from src.domain.errors import InputAbortedError

# =============================================================================
# UI Config
# =============================================================================

@dataclass(frozen=True)
class UIConfig:
    """터미널 UI 설정."""
    color: bool = False
    prompt: str = DEFAULT_PROMPT


# ANSI 색상 코드
COLORS = {
    "bold": "\033[1m",
    "dim": "\033[2m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "cyan": "\033[36m",
}
RESET = "\033[0m"

SEPARATOR_WIDTH = 80


# =============================================================================
# Console
# =============================================================================

class Console:
    """
    터미널 입출력.

    input_func: 한 줄 읽기 primitive (기본: input)
    """

    def __init__(
        self,
        ui: UIConfig | None = None,
        input_func: Callable[[str], str] = input,
        stream: TextIO | None = None,
        err_stream: TextIO | None = None,
    ):
        self.ui = ui or UIConfig()
        self.input_func = input_func
        self.stream = stream or sys.stdout
        self.err_stream = err_stream or sys.stderr

    # =========================================================================
    # Output
    # =========================================================================

    def style(self, text: str, *styles: str) -> str:
        """색상 적용 (color 꺼져 있으면 그대로)."""
        if not self.ui.color or not styles:
            return text
        codes = "".join(COLORS[s] for s in styles)
        return f"{codes}{text}{RESET}"

    def print(self, text: str = "", *styles: str) -> None:
        print(self.style(text, *styles), file=self.stream)

    def new_line(self) -> None:
        print(file=self.stream)

    def separator(self) -> None:
        self.print("-" * SEPARATOR_WIDTH, "dim")

    def warn(self, text: str) -> None:
        print(self.style(text, "yellow"), file=self.stream)

    def error(self, text: str) -> None:
        print(self.style(text, "red"), file=self.err_stream)

    # =========================================================================
    # Input
    # =========================================================================

    def read_line(self, prompt: str | None = None) -> str:
        """
        한 줄 입력.

        Raises:
            InputAbortedError: EOF 또는 Ctrl-C
        """
        if prompt is None:
            prompt = self.ui.prompt

        try:
            value = self.input_func(prompt)
        except EOFError:
            raise InputAbortedError("end of input") from None
        except KeyboardInterrupt:
            raise InputAbortedError("interrupted") from None

        return value.strip()

    def read_answer(self, question: str, default: str = "y") -> bool:
        """
        y/n 질문.

        빈 입력 → default, 인식 불가 답변 → 다시 질문.

        Returns:
            yes → True, no → False
        """
        hint = "Y/n" if default.lower().startswith("y") else "y/N"

        while True:
            self.print(f"{question} ({hint})", "cyan")
            answer = self.read_line().lower()

            if not answer:
                answer = default.lower()

            if answer in ("y", "yes"):
                return True
            if answer in ("n", "no"):
                return False

            self.warn(f'Please answer "y" or "n" (got "{answer}")')

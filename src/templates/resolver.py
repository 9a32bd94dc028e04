"""
변수 값 결정: 입력 → derived 계산 → 확인.

2단계 처리:
- Pass 1 (입력): 레지스트리 순서대로, 템플릿이 사용하는 입력 변수만 질문
  → 검증 실패 시 경고 후 재입력 (횟수 제한 없음)
  → 입력 스트림 실패 시 InputAbortedError (전체 중단)
- Pass 2 (derived): 입력값에서 계산 (derived → derived 의존 없음)

확인 단계에서 "no" 답변은 에러가 아님 (정상 중단, 대상 폴더 변경 없음).
"""

import logging
from collections.abc import Callable
from datetime import datetime

from src.core.console import Console
from src.domain.schemas import Template
from src.domain.variables import KNOWN_VARIABLES, VariableRegistry

logger = logging.getLogger(__name__)

# 변수 이름 출력 폭 ("NAME:" 포함)
NAME_COLUMN_WIDTH = 16


class VariableResolver:
    """
    템플릿 변수 값 결정기.

    Template.variables를 직접 변경함.
    """

    def __init__(
        self,
        console: Console,
        registry: VariableRegistry = KNOWN_VARIABLES,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Args:
            console: 입출력 콘솔
            registry: 변수 레지스트리
            clock: 날짜 derived 변수 계산용 (테스트에서 고정)
        """
        self.console = console
        self.registry = registry
        self.clock = clock

    def resolve(self, template: Template) -> bool:
        """
        입력 → derived 계산 → 확인.

        Returns:
            확인 단계에서 yes → True, no → False

        Raises:
            InputAbortedError: 입력 스트림 실패
        """
        self.read_values(template)
        self.apply_derived(template)
        return self.confirm(template)

    # =========================================================================
    # Pass 1: 사용자 입력
    # =========================================================================

    def read_values(self, template: Template) -> None:
        """입력이 필요한 변수 값을 순서대로 질문."""
        total = template.input_count(self.registry)
        current = 0

        if total:
            self.console.new_line()

        for name in self.registry.input_names:
            if not template.has(name):
                continue

            current += 1
            template.variables[name] = self._read_value(name, current, total)

    def _read_value(self, name: str, current: int, total: int) -> str:
        variable = self.registry.get(name)

        while True:
            self.console.print(
                self.console.style(f"[{current}/{total}]", "dim")
                + " "
                + self.console.style(f"{variable.description}:", "cyan")
            )
            value = self.console.read_line()
            self.console.new_line()

            if self.registry.is_valid(name, value):
                return value

            logger.debug(f"Rejected value for {name}: {value!r}")
            self.console.warn(f'"{value}" is not a valid value for this variable')

    # =========================================================================
    # Pass 2: derived 계산
    # =========================================================================

    def apply_derived(self, template: Template) -> None:
        """템플릿이 사용하는 derived 변수 값 계산."""
        now = self.clock()

        for name in self.registry.derived_names:
            if not template.has(name):
                continue
            template.variables[name] = self.registry.derive(
                name, template.variables, now
            )

    # =========================================================================
    # Confirmation
    # =========================================================================

    def confirm(self, template: Template) -> bool:
        """
        전체 변수 값 출력 후 확인.

        Returns:
            진행 여부
        """
        self.console.separator()

        for name in self.registry.names:
            if not template.has(name):
                continue
            label = self.console.style(f"{name + ':':<{NAME_COLUMN_WIDTH}}", "bold")
            self.console.print(f"  {label} {template.variables[name]}")

        self.console.separator()
        self.console.new_line()

        ok = self.console.read_answer("Everything is ok?", "y")
        self.console.new_line()

        return ok

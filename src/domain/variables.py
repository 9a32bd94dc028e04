"""
Variable Registry: 템플릿에서 사용 가능한 변수 목록.

규칙:
- 템플릿이 참조하는 모든 변수는 레지스트리에 있어야 함 (없으면 템플릿 검증 실패)
- 레지스트리 순서 = 입력 순서 = 출력 순서
- derived 변수는 사용자 입력 없이 다른 입력값에서 계산
- derived → derived 의존 금지 (입력값에서만 계산)
"""

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from src.domain.constants import CHANGELOG_DATE_FORMAT
from src.domain.errors import ErrorCodes, TemplateError

# =============================================================================
# Variable Names
# =============================================================================

VAR_NAME = "NAME"
VAR_SHORT_NAME = "SHORT_NAME"
VAR_VERSION = "VERSION"
VAR_DESC = "DESC"
VAR_DESC_README = "DESC_README"

VAR_CODEBEAT_UUID = "CODEBEAT_UUID"

VAR_SHORT_NAME_TITLE = "SHORT_NAME_TITLE"
VAR_SHORT_NAME_LOWER = "SHORT_NAME_LOWER"
VAR_SHORT_NAME_UPPER = "SHORT_NAME_UPPER"
VAR_SPEC_CHANGELOG_DATE = "SPEC_CHANGELOG_DATE"


# =============================================================================
# Derived Rules
# =============================================================================

class DerivedRule(str, Enum):
    """derived 변수 계산 규칙."""

    TITLE_CASE = "title_case"  # SHORT_NAME → My-App
    LOWER_CASE = "lower_case"  # SHORT_NAME → my-app
    UPPER_CASE = "upper_case"  # SHORT_NAME → MY-APP
    CHANGELOG_DATE = "changelog_date"  # 현재 날짜 → Mon Oct 19 2026


_WORD_START = re.compile(r"\b\w")


def title_case(value: str) -> str:
    """
    단어 첫 글자만 대문자로.

    단어 경계: 문자/숫자/밑줄이 아닌 문자 다음.
    나머지 글자는 그대로 유지 (str.title()과 다름).

    Examples:
        my-app → My-App
        my_app → My_app
        app2go → App2go
    """
    return _WORD_START.sub(lambda m: m.group().upper(), value)


def _derive(rule: DerivedRule, source: str, now: datetime) -> str:
    if rule is DerivedRule.TITLE_CASE:
        return title_case(source)
    if rule is DerivedRule.LOWER_CASE:
        return source.lower()
    if rule is DerivedRule.UPPER_CASE:
        return source.upper()
    if rule is DerivedRule.CHANGELOG_DATE:
        return now.strftime(CHANGELOG_DATE_FORMAT)
    raise ValueError(f"Unsupported derived rule: {rule!r}")


# =============================================================================
# Data Classes
# =============================================================================

@dataclass(frozen=True)
class Variable:
    """템플릿 변수 정의."""
    name: str
    description: str
    pattern: str = ""  # 빈 문자열 = 항상 유효
    derived: DerivedRule | None = None
    source: str = VAR_SHORT_NAME  # derived 계산에 사용하는 입력 변수

    @property
    def is_derived(self) -> bool:
        return self.derived is not None

    def is_valid(self, value: str) -> bool:
        """값이 pattern과 완전히 일치하는지 확인."""
        if not self.pattern:
            return True
        return re.fullmatch(self.pattern, value) is not None


class VariableRegistry:
    """
    변수 레지스트리 (불변).

    names: 입력/출력 순서
    """

    def __init__(self, variables: Iterable[Variable]) -> None:
        items = list(variables)
        self._names: tuple[str, ...] = tuple(v.name for v in items)
        self._info: dict[str, Variable] = {v.name: v for v in items}

        if len(self._info) != len(self._names):
            raise ValueError("Duplicate variable names in registry")

        for v in items:
            if not v.is_derived:
                continue
            source = self._info.get(v.source)
            if source is None or source.is_derived:
                raise ValueError(
                    f"Derived variable {v.name} must depend on an input variable"
                )

    def __contains__(self, name: object) -> bool:
        return name in self._info

    def __len__(self) -> int:
        return len(self._names)

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    @property
    def input_names(self) -> tuple[str, ...]:
        return tuple(n for n in self._names if not self._info[n].is_derived)

    @property
    def derived_names(self) -> tuple[str, ...]:
        return tuple(n for n in self._names if self._info[n].is_derived)

    def get(self, name: str) -> Variable:
        """
        변수 정의 조회.

        Raises:
            TemplateError: UNKNOWN_VARIABLE
        """
        try:
            return self._info[name]
        except KeyError:
            raise TemplateError(
                ErrorCodes.UNKNOWN_VARIABLE,
                f'Unknown variable "{name}"',
                variable=name,
            ) from None

    def is_known(self, name: str) -> bool:
        return name in self._info

    def is_derived(self, name: str) -> bool:
        return self.is_known(name) and self._info[name].is_derived

    def requires_input(self, name: str) -> bool:
        return self.is_known(name) and not self._info[name].is_derived

    def is_valid(self, name: str, value: str) -> bool:
        """알 수 없는 변수는 항상 invalid."""
        if not self.is_known(name):
            return False
        return self._info[name].is_valid(value)

    def derive(
        self,
        name: str,
        values: Mapping[str, str],
        now: datetime | None = None,
    ) -> str:
        """
        derived 변수 값 계산.

        Args:
            name: derived 변수 이름
            values: 이미 입력된 값
            now: 날짜 계산 기준 시각 (None이면 현재 시각)

        Returns:
            계산된 값
        """
        variable = self.get(name)
        if variable.derived is None:
            raise ValueError(f"Variable {name} is not derived")

        if now is None:
            now = datetime.now()

        return _derive(variable.derived, values.get(variable.source, ""), now)


# =============================================================================
# Built-in Registry
# =============================================================================

KNOWN_VARIABLES = VariableRegistry([
    Variable(VAR_NAME, "Name", r"[a-zA-Z0-9_\-]{2,32}"),
    Variable(
        VAR_SHORT_NAME,
        "Short name (binary name or repository name)",
        r"[a-z0-9_\-]{2,32}",
    ),
    Variable(VAR_VERSION, "Version (in semver notation)", r"[0-9]+\.[0-9]*\.?[0-9]*"),
    Variable(VAR_DESC, "Description", r".{16,128}"),
    Variable(
        VAR_DESC_README,
        "Description for README file (part after 'app is… ')",
        r".{16,128}",
    ),
    Variable(VAR_CODEBEAT_UUID, "Codebeat project UUID"),
    Variable(
        VAR_SHORT_NAME_TITLE,
        "Short name in title case",
        derived=DerivedRule.TITLE_CASE,
    ),
    Variable(
        VAR_SHORT_NAME_LOWER,
        "Short name in lower case",
        derived=DerivedRule.LOWER_CASE,
    ),
    Variable(
        VAR_SHORT_NAME_UPPER,
        "Short name in upper case",
        derived=DerivedRule.UPPER_CASE,
    ),
    Variable(
        VAR_SPEC_CHANGELOG_DATE,
        "Date in spec changelog",
        derived=DerivedRule.CHANGELOG_DATE,
    ),
])

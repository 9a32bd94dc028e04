"""
템플릿 카탈로그: 템플릿 목록/조회.

구조:
templates/
├── package/         # 템플릿 이름 = 폴더명
│   └── README.md
└── simple-utility/
    ├── _name_.py    # _name_ → SHORT_NAME 값
    └── README.md

규칙:
- templates 루트는 존재 + 읽기/실행 권한 필요 (없으면 모든 조회 실패)
- 숨김 폴더, 파일, 권한 없는 폴더는 템플릿이 아님
- 목록은 자연 정렬 (app2 < app10)
- 목록 조회 중 한 템플릿이라도 스캔 실패 → 전체 실패 (건너뛰지 않음)
"""

import logging
import os
import re
from pathlib import Path

from src.domain.errors import ErrorCodes, TemplateError
from src.domain.schemas import Template
from src.domain.variables import KNOWN_VARIABLES, VariableRegistry
from src.templates.scanner import scan_template

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"(\d+)")


def natural_sort_key(text: str) -> list:
    """
    자연 정렬 키.

    "app10" → ["app", 10, ""] (숫자 부분은 정수로 비교)
    """
    return [
        int(part) if part.isdigit() else part.lower()
        for part in _DIGITS.split(text)
    ]


class TemplateCatalog:
    """템플릿 목록/조회."""

    def __init__(
        self,
        templates_root: Path,
        registry: VariableRegistry = KNOWN_VARIABLES,
    ):
        """
        Args:
            templates_root: templates/ 루트 경로
            registry: 템플릿 검증에 사용할 변수 레지스트리
        """
        self.templates_root = templates_root
        self.registry = registry

    # =========================================================================
    # Read
    # =========================================================================

    def template_names(self) -> list[str]:
        """
        템플릿 이름 목록 (스캔 없음).

        Raises:
            TemplateError: TEMPLATES_DIR_NOT_FOUND, TEMPLATES_DIR_PERMISSION_DENIED
        """
        self.validate_root()

        names = [
            entry.name
            for entry in self.templates_root.iterdir()
            if not entry.name.startswith(".")
            and entry.is_dir()
            and os.access(entry, os.R_OK | os.X_OK)
        ]
        names.sort(key=natural_sort_key)
        return names

    def list_templates(self) -> list[Template]:
        """
        모든 템플릿 스캔.

        Returns:
            Template 목록 (자연 정렬)

        Raises:
            TemplateError: TEMPLATE_INVALID (첫 번째 실패 템플릿)
        """
        result = []

        for name in self.template_names():
            try:
                result.append(self._scan(name))
            except (TemplateError, OSError) as e:
                cause = e.message if isinstance(e, TemplateError) else str(e)
                raise TemplateError(
                    ErrorCodes.TEMPLATE_INVALID,
                    f'Problem with template "{name}": {cause}',
                    template=name,
                    cause=cause,
                ) from e

        return result

    def has_template(self, name: str) -> bool:
        """템플릿 존재 여부."""
        return name in self.template_names()

    def get_template(self, name: str) -> Template:
        """
        템플릿 스캔.

        Raises:
            TemplateError: TEMPLATE_NOT_FOUND, UNKNOWN_VARIABLE
            OSError: 파일 읽기 실패
        """
        if not self.has_template(name):
            raise TemplateError(
                ErrorCodes.TEMPLATE_NOT_FOUND,
                f'There is no template with name "{name}"',
                template=name,
            )

        return self._scan(name)

    # =========================================================================
    # Internal Helpers
    # =========================================================================

    def validate_root(self) -> None:
        """
        templates 루트 검증.

        Raises:
            TemplateError: TEMPLATES_DIR_NOT_FOUND, TEMPLATES_DIR_PERMISSION_DENIED
        """
        root = self.templates_root

        if not root.is_dir():
            raise TemplateError(
                ErrorCodes.TEMPLATES_DIR_NOT_FOUND,
                f"Can't find directory with templates ({root})",
                templates_root=str(root),
            )

        if not os.access(root, os.R_OK | os.X_OK):
            raise TemplateError(
                ErrorCodes.TEMPLATES_DIR_PERMISSION_DENIED,
                f"Directory with templates ({root}) is not readable",
                templates_root=str(root),
            )

    def _scan(self, name: str) -> Template:
        logger.debug(f"Scanning template {name}")
        return scan_template(name, self.templates_root / name, self.registry)

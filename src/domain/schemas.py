"""
Data schemas for scratch.

규칙:
- Template.files는 스캔 이후 불변 (tuple)
- Template.variables 값은 Resolver만 변경
- 한 번의 생성 실행이 Template을 독점 (동시 실행 미지원)
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from src.domain.variables import VariableRegistry

# =============================================================================
# Template
# =============================================================================

@dataclass
class Template:
    """
    스캔된 템플릿.

    variables: 이름 → 값 (스캔 직후 모두 "")
    files: 템플릿 루트 기준 상대 경로 (POSIX 형식, 정렬됨)
    """
    name: str
    path: Path
    variables: dict[str, str] = field(default_factory=dict)
    files: tuple[str, ...] = ()

    def has(self, name: str) -> bool:
        """템플릿이 해당 변수를 사용하는지 확인."""
        return name in self.variables

    def input_count(self, registry: VariableRegistry) -> int:
        """사용자 입력이 필요한 변수 개수."""
        return sum(1 for name in self.variables if registry.requires_input(name))

    @property
    def is_empty(self) -> bool:
        return not self.files

    def to_dict(self) -> dict[str, Any]:
        """로그/디버그 출력용."""
        return {
            "name": self.name,
            "path": str(self.path),
            "variables": dict(self.variables),
            "files": list(self.files),
        }


# =============================================================================
# Generation Report
# =============================================================================

@dataclass
class GenerationReport:
    """생성 실행 결과."""
    template: str
    target_dir: Path
    written: list[Path] = field(default_factory=list)

    @property
    def file_count(self) -> int:
        return len(self.written)

    def summary(self) -> str:
        noun = "file" if self.file_count == 1 else "files"
        return (
            f"{self.file_count} {noun} generated from template "
            f'"{self.template}" into {self.target_dir}'
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "template": self.template,
            "target_dir": str(self.target_dir),
            "written": [str(p) for p in self.written],
        }

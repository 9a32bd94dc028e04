"""
Templates layer: 템플릿 스캔/값 결정/복사.

역할:
- 템플릿 목록/조회 (catalog.py)
- placeholder 추출 + 검증 (scanner.py)
- 변수 값 입력 + derived 계산 (resolver.py)
- 대상 폴더로 복사 + 치환 (materializer.py)

주의: 폴더 구분
- src/templates/ → 코드 (이 모듈)
- templates/ (루트) → 기본 템플릿 데이터
"""

from .catalog import TemplateCatalog, natural_sort_key
from .materializer import (
    check_target_dir,
    copy_template_file,
    format_file_name,
    materialize,
    substitute_line,
)
from .resolver import VariableResolver
from .scanner import (
    PLACEHOLDER_PATTERN,
    detect_placeholders,
    has_placeholders,
    list_template_files,
    scan_template,
)

__all__ = [
    # catalog
    "TemplateCatalog",
    "natural_sort_key",
    # scanner
    "PLACEHOLDER_PATTERN",
    "detect_placeholders",
    "has_placeholders",
    "list_template_files",
    "scan_template",
    # resolver
    "VariableResolver",
    # materializer
    "check_target_dir",
    "copy_template_file",
    "format_file_name",
    "materialize",
    "substitute_line",
]

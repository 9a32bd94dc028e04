"""
템플릿 스캐너: 템플릿 폴더 → 사용 변수 목록.

처리 순서:
1. 템플릿 폴더의 모든 파일 수집 (재귀, 숨김 파일 포함)
2. 각 파일을 줄 단위로 읽어 {{NAME}} placeholder 추출
3. 추출된 모든 변수가 레지스트리에 있는지 검증

⚠️ 읽기 에러는 즉시 전파 (스캔 중단)
"""

import logging
import re
from pathlib import Path

from src.domain.constants import PLACEHOLDER_REGEX
from src.domain.errors import ErrorCodes, TemplateError
from src.domain.schemas import Template
from src.domain.variables import KNOWN_VARIABLES, VariableRegistry

logger = logging.getLogger(__name__)

# =============================================================================
# Placeholder Detection
# =============================================================================

PLACEHOLDER_PATTERN = re.compile(PLACEHOLDER_REGEX)


def detect_placeholders(text: str) -> list[str]:
    """
    텍스트에서 placeholder 감지.

    {{NAME}}, {{SHORT_NAME}} 등의 패턴을 찾음.
    {{ name }}처럼 공백이나 소문자가 있으면 placeholder가 아님.

    Args:
        text: 검색할 텍스트

    Returns:
        placeholder 이름 목록 (중복 포함)
    """
    return PLACEHOLDER_PATTERN.findall(text)


def has_placeholders(text: str) -> bool:
    """placeholder가 있는지 확인."""
    return bool(PLACEHOLDER_PATTERN.search(text))


# =============================================================================
# File Listing
# =============================================================================

def list_template_files(template_dir: Path) -> list[str]:
    """
    템플릿 폴더의 모든 파일 목록.

    - 재귀 탐색, 숨김 파일 포함
    - 폴더 자체와 하위 폴더는 제외 (파일만)
    - POSIX 형식 상대 경로, 정렬됨

    Args:
        template_dir: 템플릿 폴더 경로

    Returns:
        상대 경로 목록
    """
    files = [
        path.relative_to(template_dir).as_posix()
        for path in template_dir.rglob("*")
        if path.is_file()
    ]
    files.sort()
    return files


# =============================================================================
# Variable Extraction
# =============================================================================

def scan_file_for_variables(file_path: Path) -> list[str]:
    """
    파일 한 개에서 placeholder 추출.

    surrogateescape로 읽으므로 UTF-8이 아닌 바이트가 있어도 실패하지 않음.

    Raises:
        OSError: 파일 읽기 실패
    """
    result: list[str] = []

    with open(file_path, encoding="utf-8", errors="surrogateescape", newline="\n") as f:
        for line in f:
            if not has_placeholders(line):
                continue
            result.extend(detect_placeholders(line))

    return result


def extract_variables(template_dir: Path, files: list[str]) -> dict[str, str]:
    """
    템플릿 전체 파일에서 중복 없는 변수 목록 추출.

    Args:
        template_dir: 템플릿 폴더 경로
        files: 상대 경로 목록

    Returns:
        변수 이름 → "" (아직 값 없음)
    """
    variables: dict[str, str] = {}

    for rel_path in files:
        for name in scan_file_for_variables(template_dir / rel_path):
            variables[name] = ""

    return variables


def validate_variables(
    template_name: str,
    variables: dict[str, str],
    registry: VariableRegistry = KNOWN_VARIABLES,
) -> None:
    """
    모든 변수가 레지스트리에 있는지 검증.

    Raises:
        TemplateError: UNKNOWN_VARIABLE (첫 번째 미등록 변수, 이름순)
    """
    unknown = sorted(name for name in variables if not registry.is_known(name))

    if unknown:
        raise TemplateError(
            ErrorCodes.UNKNOWN_VARIABLE,
            f'Template "{template_name}" contains unknown variable "{unknown[0]}"',
            template=template_name,
            variable=unknown[0],
            unknown=unknown,
        )


def scan_template(
    name: str,
    template_dir: Path,
    registry: VariableRegistry = KNOWN_VARIABLES,
) -> Template:
    """
    템플릿 폴더 스캔.

    Args:
        name: 템플릿 이름 (폴더명)
        template_dir: 템플릿 폴더 경로
        registry: 변수 레지스트리

    Returns:
        Template (variables 값은 모두 "")

    Raises:
        TemplateError: UNKNOWN_VARIABLE
        OSError: 파일 읽기 실패
    """
    files = list_template_files(template_dir)
    variables = extract_variables(template_dir, files)
    validate_variables(name, variables, registry)

    logger.debug(
        f"Scanned template {name}: {len(files)} files, "
        f"variables={sorted(variables)}"
    )

    return Template(
        name=name,
        path=template_dir,
        variables=variables,
        files=tuple(files),
    )

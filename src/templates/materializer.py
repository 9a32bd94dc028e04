"""
템플릿 복사: 템플릿 파일 → 대상 폴더 (변수 치환).

규칙:
- 대상 폴더가 없으면 생성
- 대상 폴더가 있으면 디렉터리 + rwx 권한 + 비어 있어야 함
  (.git, .github, README.md, LICENSE만 허용)
- 줄 단위 치환, 모든 줄은 \n으로 끝남 (원본 줄바꿈 형식 무시)
- 줄 구분은 \n만, 단독 \r 바이트는 그대로 유지
- 등록되지 않은/값 없는 placeholder는 그대로 남김 (재검증 안 함)
- 중간 실패 시 롤백 없음 (일부 파일만 생성된 상태로 남음)
"""

import logging
import os
import re
from collections.abc import Mapping
from pathlib import Path

from src.domain.constants import (
    FILENAME_TOKEN,
    FILENAME_TOKEN_VARIABLE,
    TARGET_ALLOWED_ENTRIES,
)
from src.domain.errors import ErrorCodes, TemplateError
from src.domain.schemas import Template
from src.templates.scanner import PLACEHOLDER_PATTERN

logger = logging.getLogger(__name__)

# =============================================================================
# Target Directory Check
# =============================================================================


def check_target_dir(target_dir: Path) -> None:
    """
    대상 폴더 사전 검증.

    없는 폴더는 통과 (materialize에서 생성).

    Args:
        target_dir: 대상 폴더 경로

    Raises:
        TemplateError: TARGET_NOT_DIRECTORY, TARGET_PERMISSION_DENIED,
            TARGET_NOT_EMPTY
    """
    if not target_dir.exists():
        return

    if not target_dir.is_dir():
        raise TemplateError(
            ErrorCodes.TARGET_NOT_DIRECTORY,
            f"{target_dir} is not a directory",
            target=str(target_dir),
        )

    if not os.access(target_dir, os.R_OK | os.W_OK | os.X_OK):
        raise TemplateError(
            ErrorCodes.TARGET_PERMISSION_DENIED,
            f"Directory {target_dir} is not readable, writable or executable",
            target=str(target_dir),
        )

    entries = sorted(
        entry.name
        for entry in target_dir.iterdir()
        if entry.name not in TARGET_ALLOWED_ENTRIES
    )

    if entries:
        raise TemplateError(
            ErrorCodes.TARGET_NOT_EMPTY,
            "Target directory is not empty!",
            target=str(target_dir),
            entries=entries,
        )


# =============================================================================
# Substitution
# =============================================================================


def format_file_name(rel_path: str, variables: Mapping[str, str]) -> str:
    """
    파일명 토큰 치환.

    _name_.go → {SHORT_NAME}.go
    """
    if FILENAME_TOKEN not in rel_path:
        return rel_path
    return rel_path.replace(FILENAME_TOKEN, variables.get(FILENAME_TOKEN_VARIABLE, ""))


def substitute_line(line: str, variables: Mapping[str, str]) -> str:
    """
    한 줄의 placeholder 치환.

    variables에 없는 이름은 {{NAME}} 그대로 유지.
    """
    if "{{" not in line:
        return line

    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in variables:
            return variables[name]
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(replace, line)


def _strip_line_ending(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def copy_template_file(
    source: Path,
    target: Path,
    variables: Mapping[str, str],
) -> None:
    """
    파일 한 개 복사 + 치환.

    Raises:
        OSError: 읽기/쓰기 실패
    """
    with (
        open(source, encoding="utf-8", errors="surrogateescape", newline="\n") as src,
        open(target, "w", encoding="utf-8", errors="surrogateescape", newline="") as dst,
    ):
        for raw_line in src:
            line = substitute_line(_strip_line_ending(raw_line), variables)
            dst.write(line + "\n")


# =============================================================================
# Materialize
# =============================================================================


def materialize(template: Template, target_dir: Path) -> list[Path]:
    """
    템플릿 전체 복사.

    Args:
        template: 값이 결정된 Template
        target_dir: 대상 폴더

    Returns:
        생성된 파일 경로 목록 (템플릿 파일 순서)

    Raises:
        TemplateError: 대상 폴더 검증 실패
        OSError: 파일 I/O 실패 (롤백 없음)
    """
    check_target_dir(target_dir)

    if not target_dir.exists():
        target_dir.mkdir(parents=True)
        logger.debug(f"Created target directory {target_dir}")

    written: list[Path] = []

    for rel_path in template.files:
        source = template.path / rel_path
        target = target_dir / format_file_name(rel_path, template.variables)

        target.parent.mkdir(parents=True, exist_ok=True)
        copy_template_file(source, target, template.variables)

        logger.debug(f"Generated {target} from {source}")
        written.append(target)

    return written

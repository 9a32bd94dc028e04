"""
Error definitions for scratch.

에러 분류:
- 설정/위치 에러 → 즉시 중단 (templates 루트 없음, 권한 부족)
- 템플릿 구조 에러 → 해당 템플릿 실패 (목록 조회 시 전체 실패)
- 대상 디렉터리 에러 → 아무것도 쓰지 않고 중단
- 입력 검증 실패 → 에러 아님, 재입력 요청
- I/O 에러 → OSError 그대로 전파 (롤백 없음)
"""

from typing import Any


class TemplateError(Exception):
    """
    템플릿 처리 중 발생하는 치명적 에러.

    Usage:
        raise TemplateError(
            ErrorCodes.UNKNOWN_VARIABLE,
            'Template "package" contains unknown variable "FOO"',
            template="package",
            variable="FOO",
        )
    """

    def __init__(self, code: str, message: str, **context: Any) -> None:
        self.code = code
        self.message = message
        self.context = context
        super().__init__(f"[{code}] {message}")

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            "message": self.message,
            **self.context,
        }


class InputAbortedError(Exception):
    """입력 스트림 실패 (EOF, Ctrl-C) → 생성 전체 중단."""

    def __init__(self, reason: str = "input aborted") -> None:
        self.reason = reason
        super().__init__(reason)


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Configuration ===
    TEMPLATES_DIR_NOT_FOUND = "TEMPLATES_DIR_NOT_FOUND"
    TEMPLATES_DIR_PERMISSION_DENIED = "TEMPLATES_DIR_PERMISSION_DENIED"
    CONFIG_INVALID = "CONFIG_INVALID"

    # === Template structure ===
    UNKNOWN_VARIABLE = "UNKNOWN_VARIABLE"
    TEMPLATE_INVALID = "TEMPLATE_INVALID"
    TEMPLATE_NOT_FOUND = "TEMPLATE_NOT_FOUND"

    # === Target directory ===
    TARGET_NOT_DIRECTORY = "TARGET_NOT_DIRECTORY"
    TARGET_PERMISSION_DENIED = "TARGET_PERMISSION_DENIED"
    TARGET_NOT_EMPTY = "TARGET_NOT_EMPTY"

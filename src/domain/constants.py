"""
Domain Constants: 스캐폴더 전역 상수.

placeholder 형식, 파일명 토큰, 대상 디렉터리 허용 목록 등.
"""

# =============================================================================
# Placeholder (템플릿 변수 토큰)
# =============================================================================
# 형식: {{NAME}}, NAME은 [A-Z0-9_]+
# 이 형식이 아닌 텍스트는 그대로 복사됨

PLACEHOLDER_REGEX = r"\{\{([A-Z0-9_]+)\}\}"

# 파일명에 포함되면 SHORT_NAME 값으로 치환
# 예: _name_.go → frobnicator.go
FILENAME_TOKEN = "_name_"
FILENAME_TOKEN_VARIABLE = "SHORT_NAME"

# =============================================================================
# Target Directory (대상 디렉터리 정책)
# =============================================================================
# 이미 존재하는 대상 디렉터리에 허용되는 항목 (VCS 메타데이터, README, LICENSE)

TARGET_ALLOWED_ENTRIES = frozenset({
    ".git",
    ".github",
    "README.md",
    "LICENSE",
})

# =============================================================================
# Derived Variables
# =============================================================================
# RPM spec changelog 날짜 형식 (예: Mon Oct 19 2026)

CHANGELOG_DATE_FORMAT = "%a %b %d %Y"

# =============================================================================
# Configuration
# =============================================================================

APP_NAME = "scratch"
APP_VERSION = "0.1.0"
APP_DESCRIPTION = "Utility for generating blank files for apps and services"

ENV_TEMPLATES_DIR = "SCRATCH_TEMPLATES_DIR"
ENV_CONFIG_PATH = "SCRATCH_CONFIG"
CONFIG_FILENAME = "config.yaml"
DEFAULT_CONFIG_FILENAME = "default.yaml"
TEMPLATES_DIRNAME = "templates"

DEFAULT_PROMPT = "› "

"""
설정 로드: config.yaml + 환경 변수.

templates 루트 결정 순서 (먼저 찾은 것 사용):
1. SCRATCH_TEMPLATES_DIR 환경 변수
2. 설정 파일의 templates_root
3. 프로젝트 루트의 templates/

설정 파일 결정 순서:
1. SCRATCH_CONFIG 환경 변수
2. $XDG_CONFIG_HOME/scratch/config.yaml (~/.config/scratch/config.yaml)
3. 프로젝트 루트의 default.yaml
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from src.core.console import UIConfig
from src.domain.constants import (
    APP_NAME,
    CONFIG_FILENAME,
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_PROMPT,
    ENV_CONFIG_PATH,
    ENV_TEMPLATES_DIR,
    TEMPLATES_DIRNAME,
)
from src.domain.errors import ErrorCodes, TemplateError

PROJECT_ROOT = Path(__file__).parent.parent.parent


# =============================================================================
# Settings
# =============================================================================

@dataclass
class Settings:
    """실행 설정."""
    templates_root: Path
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "WARNING"


# =============================================================================
# Config File
# =============================================================================

def find_config_path(env: Mapping[str, str] | None = None) -> Path:
    """설정 파일 경로 결정."""
    if env is None:
        env = os.environ

    if env.get(ENV_CONFIG_PATH):
        return Path(env[ENV_CONFIG_PATH]).expanduser()

    config_home = env.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    user_config = Path(config_home).expanduser() / APP_NAME / CONFIG_FILENAME
    if user_config.exists():
        return user_config

    return PROJECT_ROOT / DEFAULT_CONFIG_FILENAME


def load_config(config_path: Path | None = None) -> dict:
    """
    설정 파일 로드.

    파일이 없으면 빈 dict.

    Raises:
        TemplateError: CONFIG_INVALID (읽기 실패, YAML 파싱 실패, 최상위가 mapping이 아님)
    """
    if config_path is None:
        config_path = find_config_path()

    if not config_path.exists():
        return {}

    try:
        with open(config_path, encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise TemplateError(
            ErrorCodes.CONFIG_INVALID,
            f"Can't parse configuration file {config_path}: {e}",
            config_path=str(config_path),
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateError(
            ErrorCodes.CONFIG_INVALID,
            f"Can't read configuration file {config_path}: {e}",
            config_path=str(config_path),
        ) from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise TemplateError(
            ErrorCodes.CONFIG_INVALID,
            f"Configuration file {config_path} must contain a mapping",
            config_path=str(config_path),
        )

    return data


# =============================================================================
# Resolution
# =============================================================================

def get_templates_root(
    config: Mapping[str, Any],
    env: Mapping[str, str] | None = None,
) -> Path:
    """templates 루트 경로 결정."""
    if env is None:
        env = os.environ

    if env.get(ENV_TEMPLATES_DIR):
        return Path(env[ENV_TEMPLATES_DIR]).expanduser()

    configured = config.get("templates_root")
    if configured:
        return Path(str(configured)).expanduser()

    return PROJECT_ROOT / TEMPLATES_DIRNAME


def detect_color(
    env: Mapping[str, str] | None = None,
    is_tty: bool | None = None,
) -> bool:
    """
    터미널 색상 사용 여부.

    - TERM에 xterm/color 포함 또는 screen → 사용
    - stdout이 TTY가 아니면 사용 안 함 (FAKETTY 설정 시 예외)
    - NO_COLOR 설정 시 사용 안 함
    """
    if env is None:
        env = os.environ
    if is_tty is None:
        is_tty = os.isatty(1)

    term = env.get("TERM", "")
    color = "xterm" in term or "color" in term or term == "screen"

    if not is_tty and not env.get("FAKETTY"):
        color = False

    if env.get("NO_COLOR"):
        color = False

    return color


def load_settings(
    config_path: Path | None = None,
    no_color: bool = False,
    verbose: bool = False,
    env: Mapping[str, str] | None = None,
    is_tty: bool | None = None,
) -> Settings:
    """
    설정 파일 + 환경 변수 + CLI 옵션 → Settings.

    env가 None이면 .env를 읽은 뒤 os.environ 사용.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    if config_path is None:
        config_path = find_config_path(env)

    config = load_config(config_path)
    ui_config = config.get("ui") or {}
    if not isinstance(ui_config, dict):
        raise TemplateError(
            ErrorCodes.CONFIG_INVALID,
            f'Section "ui" of configuration file {config_path} must be a mapping',
            config_path=str(config_path),
        )

    color = detect_color(env, is_tty)
    if ui_config.get("color") is False or no_color:
        color = False

    log_level = "DEBUG" if verbose else str(config.get("log_level", "WARNING")).upper()

    return Settings(
        templates_root=get_templates_root(config, env),
        ui=UIConfig(
            color=color,
            prompt=str(ui_config.get("prompt", DEFAULT_PROMPT)),
        ),
        log_level=log_level,
    )

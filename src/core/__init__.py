"""
Core layer: 설정, 콘솔 입출력, 로깅.

역할:
- config.yaml/환경 변수 → Settings
- 터미널 입출력 (UIConfig 명시 전달, 전역 상태 없음)
"""

from .config import Settings, detect_color, get_templates_root, load_config, load_settings
from .console import Console, UIConfig
from .logging import configure_logging, log_report

__all__ = [
    # config
    "Settings",
    "load_config",
    "load_settings",
    "get_templates_root",
    "detect_color",
    # console
    "Console",
    "UIConfig",
    # logging
    "configure_logging",
    "log_report",
]

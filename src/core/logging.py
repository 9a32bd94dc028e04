"""
Logging 설정 + 생성 실행 기록.

- 로그는 stderr로 (stdout은 사용자 대화용)
- 기본 WARNING, --verbose 시 DEBUG
"""

import logging
import sys

from src.domain.schemas import GenerationReport

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger(__name__)


def configure_logging(level: str = "WARNING") -> None:
    """
    루트 로거 설정.

    Args:
        level: 로그 레벨 이름 (DEBUG, INFO, WARNING, ...)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stderr,
        force=True,
    )


def log_report(report: GenerationReport) -> None:
    """생성 결과 기록."""
    logger.info(report.summary())
    for path in report.written:
        logger.debug(f"  - {path}")

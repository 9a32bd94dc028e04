"""
scratch CLI 진입점.

사용법:
    # 템플릿 목록
    scratch

    # 템플릿 파일/변수 목록
    scratch package

    # 현재 폴더에 package 템플릿 생성
    scratch package .

    # 서비스 템플릿을 새 폴더에 생성
    scratch service ~/projects/myapp

실행:
- uv run scratch
- uv run python -m src.app.cli
"""

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from src.core.config import Settings, load_settings
from src.core.console import Console
from src.core.logging import configure_logging, log_report
from src.domain.constants import APP_DESCRIPTION, APP_NAME, APP_VERSION
from src.domain.errors import InputAbortedError, TemplateError
from src.domain.schemas import GenerationReport, Template
from src.domain.variables import KNOWN_VARIABLES
from src.templates.catalog import TemplateCatalog
from src.templates.materializer import check_target_dir, materialize
from src.templates.resolver import VariableResolver

logger = logging.getLogger(__name__)

EXAMPLES = """
examples:
  scratch package .
      Generate package blank files in current directory
  scratch service ~/projects/myapp
      Generate service blank files in ~/projects/myapp
"""


# =============================================================================
# Commands
# =============================================================================


def list_templates(catalog: TemplateCatalog, console: Console) -> int:
    """모든 템플릿 목록 출력."""
    templates = catalog.list_templates()

    if not templates:
        console.print("No templates found", "yellow")
        return 0

    console.new_line()

    for t in templates:
        if t.is_empty:
            details = "(empty)"
        else:
            noun = "file" if len(t.files) == 1 else "files"
            details = f"({len(t.files)} {noun})"
        console.print(
            f" {console.style('•', 'dim')} {t.name} {console.style(details, 'dim')}"
        )

    console.new_line()
    return 0


def show_template(catalog: TemplateCatalog, console: Console, name: str) -> int:
    """템플릿 파일/변수 목록 출력."""
    template = catalog.get_template(name)

    console.new_line()
    console.print(f"Template {template.name}", "bold")
    console.print(f"  {template.path}", "dim")
    console.new_line()

    if template.is_empty:
        console.print("  (empty)", "dim")
    for rel_path in template.files:
        console.print(f"  {console.style('•', 'dim')} {rel_path}")

    _print_template_variables(console, template)
    console.new_line()
    return 0


def _print_template_variables(console: Console, template: Template) -> None:
    if not template.variables:
        return

    console.new_line()
    console.print("Variables:", "bold")

    for name in KNOWN_VARIABLES.names:
        if not template.has(name):
            continue
        variable = KNOWN_VARIABLES.get(name)
        suffix = " (derived)" if variable.is_derived else ""
        console.print(
            f"  {console.style('•', 'dim')} {name} "
            f"{console.style(variable.description + suffix, 'dim')}"
        )


def generate(
    catalog: TemplateCatalog,
    console: Console,
    template_name: str,
    target: str,
) -> int:
    """
    템플릿 → 대상 폴더 생성.

    순서: 대상 폴더 검증 → 템플릿 조회/스캔 → 값 입력 → 확인 → 복사
    """
    target_dir = Path(target).expanduser().resolve()

    check_target_dir(target_dir)
    template = catalog.get_template(template_name)

    resolver = VariableResolver(console, catalog.registry)
    if not resolver.resolve(template):
        console.print("Generation canceled, no files were written", "yellow")
        return 0

    console.print("Generating files…", "bold")
    console.new_line()

    report = GenerationReport(template=template.name, target_dir=target_dir)
    report.written = materialize(template, target_dir)
    log_report(report)

    console.print("Files successfully generated!", "green")
    return 0


# =============================================================================
# Entry Point
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description=APP_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EXAMPLES,
    )
    parser.add_argument(
        "template",
        nargs="?",
        help="템플릿 이름 (생략 시 템플릿 목록 출력)",
    )
    parser.add_argument(
        "dir",
        nargs="?",
        help="대상 폴더 (생략 시 템플릿 내용 출력)",
    )
    parser.add_argument(
        "-nc", "--no-color",
        action="store_true",
        help="Disable colors in output",
    )
    parser.add_argument(
        "-V", "--verbose",
        action="store_true",
        help="Show debug logs",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Path to configuration file",
    )
    parser.add_argument(
        "-v", "--version",
        action="version",
        version=f"{APP_NAME} {APP_VERSION}",
    )
    return parser


def run(
    args: argparse.Namespace,
    settings: Settings,
    input_func: Callable[[str], str] = input,
) -> int:
    """파싱된 인자로 명령 실행, 종료 코드 반환."""
    console = Console(settings.ui, input_func=input_func)
    catalog = TemplateCatalog(settings.templates_root, KNOWN_VARIABLES)

    try:
        if args.template is None:
            return list_templates(catalog, console)
        if args.dir is None:
            return show_template(catalog, console, args.template)
        return generate(catalog, console, args.template, args.dir)

    except TemplateError as e:
        logger.debug(f"Template error: {e.to_dict()}")
        console.error(e.message)
        return 1
    except InputAbortedError as e:
        console.error(f"Input aborted ({e.reason})")
        return 1
    except OSError as e:
        console.error(str(e))
        return 1


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(
            config_path=Path(args.config) if args.config else None,
            no_color=args.no_color,
            verbose=args.verbose,
        )
    except TemplateError as e:
        Console().error(e.message)
        return 1

    configure_logging(settings.log_level)
    return run(args, settings)


if __name__ == "__main__":
    sys.exit(main())

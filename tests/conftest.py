"""
Pytest fixtures for scratch tests.

테스트 구성:
- templates 루트는 항상 tmp_path 아래에 생성
- 사용자 입력은 ScriptedInput으로 대체 (터미널 사용 안 함)
"""

import io
from collections.abc import Callable, Iterable
from datetime import datetime
from pathlib import Path

import pytest

from src.core.console import Console, UIConfig

# =============================================================================
# Input / Console Fixtures
# =============================================================================


class ScriptedInput:
    """
    미리 정한 답변을 순서대로 돌려주는 input 대체.

    답변이 모두 소진되면 EOFError (Ctrl-D와 동일).
    """

    def __init__(self, answers: Iterable[str]):
        self.answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    @property
    def remaining(self) -> int:
        return len(self.answers)


@pytest.fixture
def make_console() -> Callable[..., tuple[Console, ScriptedInput, io.StringIO]]:
    """
    Console 생성 fixture.

    Returns:
        (console, scripted_input, output) 를 만드는 함수
    """

    def factory(answers: Iterable[str] = (), color: bool = False):
        scripted = ScriptedInput(answers)
        output = io.StringIO()
        console = Console(
            UIConfig(color=color),
            input_func=scripted,
            stream=output,
            err_stream=output,
        )
        return console, scripted, output

    return factory


@pytest.fixture
def fixed_now() -> datetime:
    """날짜 derived 변수 고정값 (월요일)."""
    return datetime(2026, 10, 19, 12, 0, 0)


# =============================================================================
# Template Fixtures
# =============================================================================


def write_file(root: Path, rel_path: str, content: str | bytes) -> Path:
    """파일 생성 (중간 폴더 포함)."""
    path = root / rel_path
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_bytes(content.encode("utf-8"))
    return path


@pytest.fixture
def make_file() -> Callable[[Path, str, str | bytes], Path]:
    """write_file fixture 버전."""
    return write_file


@pytest.fixture
def templates_root(tmp_path: Path) -> Path:
    """
    테스트용 templates/ 루트.

    포함:
    - package/README.md (NAME, VERSION)
    - simple-utility/ (_name_ 파일명, derived 변수 포함)
    - empty/ (파일 없음)
    """
    root = tmp_path / "templates"
    root.mkdir()

    write_file(root, "package/README.md", "Hello {{NAME}}, version {{VERSION}}.")

    write_file(
        root,
        "simple-utility/_name_.go",
        "package main\n\nconst APP = \"{{SHORT_NAME}}\"\nconst VER = \"{{VERSION}}\"\n",
    )
    write_file(
        root,
        "simple-utility/README.md",
        "# {{SHORT_NAME_TITLE}}\n\n`{{SHORT_NAME_LOWER}}` / {{SHORT_NAME_UPPER}}\n",
    )
    write_file(
        root,
        "simple-utility/common/_name_.spec",
        "* {{SPEC_CHANGELOG_DATE}} - {{VERSION}}\n",
    )

    (root / "empty").mkdir()

    return root


@pytest.fixture
def broken_template(templates_root: Path) -> Path:
    """레지스트리에 없는 변수(FOO)를 사용하는 템플릿."""
    return write_file(templates_root, "broken/main.go", "value := {{FOO}}\n").parent

"""
test_config.py - 설정 로드 테스트

검증:
- templates 루트 결정 순서: 환경 변수 → 설정 파일 → 프로젝트 templates/
- 색상 자동 감지 (TERM, TTY, NO_COLOR, --no-color)
- 잘못된 설정 파일 → CONFIG_INVALID
"""

from pathlib import Path

import pytest
import yaml

from src.core.config import (
    PROJECT_ROOT,
    detect_color,
    find_config_path,
    get_templates_root,
    load_config,
    load_settings,
)
from src.domain.errors import ErrorCodes, TemplateError

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """테스트용 config.yaml."""
    path = tmp_path / "config.yaml"
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(
            {
                "templates_root": str(tmp_path / "my-templates"),
                "ui": {"prompt": "> ", "color": True},
                "log_level": "info",
            },
            f,
        )
    return path


# =============================================================================
# load_config 테스트
# =============================================================================


class TestLoadConfig:
    """load_config 테스트."""

    def test_missing_file(self, tmp_path: Path):
        assert load_config(tmp_path / "missing.yaml") == {}

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("")

        assert load_config(path) == {}

    def test_loads_mapping(self, config_file: Path):
        config = load_config(config_file)

        assert config["ui"]["prompt"] == "> "

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("ui: [unclosed\n")

        with pytest.raises(TemplateError) as exc_info:
            load_config(path)

        assert exc_info.value.code == ErrorCodes.CONFIG_INVALID

    def test_not_mapping(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(TemplateError) as exc_info:
            load_config(path)

        assert exc_info.value.code == ErrorCodes.CONFIG_INVALID

    def test_unreadable_file(self, tmp_path: Path):
        """읽을 수 없는 경로 (폴더) → CONFIG_INVALID."""
        path = tmp_path / "config.yaml"
        path.mkdir()

        with pytest.raises(TemplateError) as exc_info:
            load_config(path)

        assert exc_info.value.code == ErrorCodes.CONFIG_INVALID
        assert "Can't read configuration file" in exc_info.value.message

    def test_invalid_encoding(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_bytes(b"ui:\n  prompt: \xff\xfe\n")

        with pytest.raises(TemplateError) as exc_info:
            load_config(path)

        assert exc_info.value.code == ErrorCodes.CONFIG_INVALID

    def test_project_default_config(self):
        """프로젝트 default.yaml은 유효해야 함."""
        config = load_config(PROJECT_ROOT / "default.yaml")

        assert config["ui"]["prompt"] == "› "


class TestFindConfigPath:
    """설정 파일 경로 결정 테스트."""

    def test_env_override(self, tmp_path: Path):
        env = {"SCRATCH_CONFIG": str(tmp_path / "custom.yaml")}

        assert find_config_path(env) == tmp_path / "custom.yaml"

    def test_user_config(self, tmp_path: Path):
        user_config = tmp_path / "scratch" / "config.yaml"
        user_config.parent.mkdir()
        user_config.write_text("{}\n")

        assert find_config_path({"XDG_CONFIG_HOME": str(tmp_path)}) == user_config

    def test_project_default(self, tmp_path: Path):
        path = find_config_path({"XDG_CONFIG_HOME": str(tmp_path)})

        assert path == PROJECT_ROOT / "default.yaml"


# =============================================================================
# templates 루트 테스트
# =============================================================================


class TestTemplatesRoot:
    """get_templates_root 테스트."""

    def test_env_wins(self, tmp_path: Path):
        env = {"SCRATCH_TEMPLATES_DIR": str(tmp_path / "env")}
        config = {"templates_root": str(tmp_path / "config")}

        assert get_templates_root(config, env) == tmp_path / "env"

    def test_config_value(self, tmp_path: Path):
        config = {"templates_root": str(tmp_path / "config")}

        assert get_templates_root(config, {}) == tmp_path / "config"

    def test_project_templates(self):
        assert get_templates_root({"templates_root": None}, {}) == PROJECT_ROOT / "templates"


# =============================================================================
# 색상 감지 테스트
# =============================================================================


class TestDetectColor:
    """detect_color 테스트."""

    @pytest.mark.parametrize("term", ["xterm", "xterm-256color", "screen", "rxvt-unicode-256color"])
    def test_color_terminals(self, term):
        assert detect_color({"TERM": term}, is_tty=True)

    @pytest.mark.parametrize("term", ["", "dumb", "vt100"])
    def test_plain_terminals(self, term):
        assert not detect_color({"TERM": term}, is_tty=True)

    def test_not_tty(self):
        assert not detect_color({"TERM": "xterm"}, is_tty=False)

    def test_fake_tty(self):
        assert detect_color({"TERM": "xterm", "FAKETTY": "1"}, is_tty=False)

    def test_no_color_env(self):
        assert not detect_color({"TERM": "xterm", "NO_COLOR": "1"}, is_tty=True)


# =============================================================================
# load_settings 테스트
# =============================================================================


class TestLoadSettings:
    """load_settings 테스트."""

    def test_from_config_file(self, config_file: Path, tmp_path: Path):
        settings = load_settings(
            config_path=config_file,
            env={"TERM": "xterm"},
            is_tty=True,
        )

        assert settings.templates_root == tmp_path / "my-templates"
        assert settings.ui.prompt == "> "
        assert settings.ui.color is True
        assert settings.log_level == "INFO"

    def test_no_color_flag(self, config_file: Path):
        settings = load_settings(
            config_path=config_file,
            no_color=True,
            env={"TERM": "xterm"},
            is_tty=True,
        )

        assert settings.ui.color is False

    def test_config_disables_color(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("ui:\n  color: false\n")

        settings = load_settings(config_path=path, env={"TERM": "xterm"}, is_tty=True)

        assert settings.ui.color is False

    def test_ui_not_mapping(self, tmp_path: Path):
        """ui: plain → CONFIG_INVALID."""
        path = tmp_path / "config.yaml"
        path.write_text("ui: plain\n")

        with pytest.raises(TemplateError) as exc_info:
            load_settings(config_path=path, env={}, is_tty=False)

        assert exc_info.value.code == ErrorCodes.CONFIG_INVALID
        assert '"ui"' in exc_info.value.message

    def test_empty_ui_section(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("ui:\n")

        settings = load_settings(config_path=path, env={}, is_tty=False)

        assert settings.ui.prompt == "› "

    def test_verbose(self, config_file: Path):
        settings = load_settings(config_path=config_file, verbose=True, env={}, is_tty=False)

        assert settings.log_level == "DEBUG"

    def test_defaults(self, tmp_path: Path):
        settings = load_settings(
            config_path=tmp_path / "missing.yaml",
            env={},
            is_tty=False,
        )

        assert settings.templates_root == PROJECT_ROOT / "templates"
        assert settings.ui.prompt == "› "
        assert settings.ui.color is False
        assert settings.log_level == "WARNING"

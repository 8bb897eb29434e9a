from pathlib import Path

import pytest

from xcresult_summary.core.config import Config
from xcresult_summary.core.errors import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("GITHUB_WORKSPACE", "GITHUB_OUTPUT", "GITHUB_STEP_SUMMARY", "XCRESULT_SUMMARY_CONFIG"):
        monkeypatch.delenv(name, raising=False)


def test_defaults_come_from_actions_environment(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GITHUB_WORKSPACE", "/home/runner/work/app/")
    monkeypatch.setenv("GITHUB_OUTPUT", str(tmp_path / "out"))
    monkeypatch.setenv("GITHUB_STEP_SUMMARY", str(tmp_path / "summary"))

    config = Config()

    assert config.workspace == "/home/runner/work/app"
    assert config.output_file == tmp_path / "out"
    assert config.summary_file == tmp_path / "summary"
    assert config.xcresult_path is None
    assert config.xcrun == "xcrun"


def test_config_file_supplies_defaults(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "xcresult_summary.toml").write_text(
        '[xcresult_summary]\nxcresult_path = "build/Test.xcresult"\nxcrun = "/usr/bin/xcrun"\nverbosity = 2\n'
    )

    config = Config()

    assert config.xcresult_path == Path("build/Test.xcresult")
    assert config.xcrun == "/usr/bin/xcrun"
    assert config.verbosity == 2


def test_explicit_values_override_config_file(tmp_path: Path):
    config_file = tmp_path / "pyproject.toml"
    config_file.write_text('[tool.xcresult_summary]\nxcrun = "/opt/xcrun"\nworkspace = "/ws"\n')

    config = Config(config_file=config_file, workspace="/explicit")

    assert config.xcrun == "/opt/xcrun"
    assert config.workspace == "/explicit"


def test_config_file_from_environment(tmp_path: Path, monkeypatch):
    config_file = tmp_path / "custom.toml"
    config_file.write_text('[xcresult_summary]\nworkspace = "/from/env"\n')
    monkeypatch.setenv("XCRESULT_SUMMARY_CONFIG", str(config_file))

    assert Config().workspace == "/from/env"


def test_broken_config_file(tmp_path: Path):
    config_file = tmp_path / "broken.toml"
    config_file.write_text("[xcresult_summary\n")

    with pytest.raises(ConfigurationError, match="Failed to read config file"):
        Config(config_file=config_file)


def test_verbosity_is_validated(tmp_path: Path):
    with pytest.raises(ValueError, match="verbosity"):
        Config(verbosity=7, config_file=tmp_path / "absent.toml")


def test_dict_round_trip(tmp_path: Path):
    config = Config(xcresult_path=tmp_path / "T.xcresult", workspace="/ws", config_file=tmp_path / "absent.toml")

    restored = Config.from_dict(config.to_dict())

    assert restored.xcresult_path == config.xcresult_path
    assert restored.workspace == "/ws"

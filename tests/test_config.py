import pytest

from palindromo.config import Settings
from palindromo.main import create_app


def test_defaults_when_unset(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    s = Settings.from_env({})
    assert s.port == 3000
    assert s.host == "0.0.0.0"
    assert s.log_path == (tmp_path / "consultas.txt").resolve()
    assert s.log_level == "INFO"


def test_env_overrides(tmp_path):
    s = Settings.from_env({
        "PORT": "8080",
        "HOST": "127.0.0.1",
        "CONSULTAS_FILE": str(tmp_path / "q.txt"),
        "LOG_LEVEL": "debug",
    })
    assert s.port == 8080
    assert s.host == "127.0.0.1"
    assert s.log_path == (tmp_path / "q.txt").resolve()
    assert s.log_level == "DEBUG"


def test_empty_port_falls_back_to_default():
    assert Settings.from_env({"PORT": ""}).port == 3000


def test_invalid_port_is_rejected():
    with pytest.raises(ValueError):
        Settings.from_env({"PORT": "abc"})


def test_app_builds_with_invalid_port(tmp_path, monkeypatch):
    monkeypatch.setenv("PORT", "abc")
    monkeypatch.setenv("CONSULTAS_FILE", str(tmp_path / "q.txt"))
    app = create_app()
    assert app.state.query_log.path == (tmp_path / "q.txt").resolve()

from pathlib import Path

import pytest

from trapper.app.config import SenderConfig, config_from_dict, load_config
from trapper.core.errors import ArgumentError, ConfigError


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_load_config_full(tmp_path: Path) -> None:
    p = _write(
        tmp_path / "sender.yml",
        "server: zbx.example\nport: 10052\ntimeout_s: 2.5\nmax_payload: 4096\nhost: web-01\n",
    )
    assert load_config(p) == SenderConfig(
        server="zbx.example", port=10052, timeout_s=2.5, max_payload=4096, host="web-01"
    )


def test_load_config_defaults(tmp_path: Path) -> None:
    cfg = load_config(_write(tmp_path / "sender.yml", "server: zbx.example\n"))
    assert cfg.port == 10051
    assert cfg.timeout_s == 10.0
    assert cfg.max_payload is None
    assert cfg.host is None


def test_null_timeout_means_blocking(tmp_path: Path) -> None:
    cfg = load_config(_write(tmp_path / "sender.yml", "server: s\ntimeout_s: null\n"))
    assert cfg.timeout_s is None


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path / "nope.yml")


def test_invalid_yaml(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path / "sender.yml", "server: [unclosed\n"))


def test_not_a_mapping(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path / "sender.yml", "- a\n- b\n"))


def test_unknown_key_has_hint() -> None:
    with pytest.raises(ConfigError) as ei:
        config_from_dict({"server": "s", "prot": 1})
    assert "port" in ei.value.hint


def test_missing_server() -> None:
    with pytest.raises(ConfigError):
        config_from_dict({"port": 10051})


@pytest.mark.parametrize(
    "data",
    [
        {"server": "s", "port": "10051"},
        {"server": "s", "port": True},
        {"server": 5},
        {"server": "s", "max_payload": 0},
        {"server": "s", "timeout_s": -1},
    ],
)
def test_invalid_values(data) -> None:
    with pytest.raises(ConfigError):
        config_from_dict(data)


def test_config_error_is_argument_error() -> None:
    assert issubclass(ConfigError, ArgumentError)

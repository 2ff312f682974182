from pathlib import Path

from agentctl.config import Config, config_path, load_config, save_config


def test_config_path_under_home(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert config_path() == tmp_path / ".agentctl" / "config.toml"


def test_config_path_without_home(monkeypatch):
    monkeypatch.delenv("HOME", raising=False)
    assert config_path() == Path(".") / ".agentctl" / "config.toml"


def test_load_missing_file_gives_default(tmp_path):
    assert load_config(tmp_path / "nope.toml") == Config()


def test_round_trip(tmp_path):
    path = tmp_path / "sub" / "config.toml"
    save_config(Config(output_format="yaml"), path)
    assert path.exists()
    assert load_config(path) == Config(output_format="yaml")


def test_round_trip_empty(tmp_path):
    path = tmp_path / "config.toml"
    save_config(Config(), path)
    assert load_config(path).output_format is None


def test_saved_file_is_toml_with_key(tmp_path):
    path = tmp_path / "config.toml"
    save_config(Config(output_format="json"), path)
    assert "output_format" in path.read_text()


def test_invalid_toml_gives_default(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("this is = = not toml")
    assert load_config(path) == Config()


def test_wrong_type_gives_default(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("output_format = 3\n")
    assert load_config(path) == Config()


def test_unknown_keys_are_ignored(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('output_format = "csv"\nother = 1\n')
    assert load_config(path) == Config(output_format="csv")


def test_default_path_uses_home(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    save_config(Config(output_format="toml"))
    assert (tmp_path / ".agentctl" / "config.toml").exists()
    assert load_config().output_format == "toml"
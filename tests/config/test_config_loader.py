"""Tests for userparam.config module."""

import pytest

from userparam.config import (
    SeedUserModel,
    UserParamConfigModel,
    find_config_path,
    load_config,
    parse_config,
)

CONFIG_YAML = """
userparam:
  interwiki_prefixes: [meta]
  ismulti_limit1: 5
  ismulti_limit2: 20
  reserved_usernames: [Robot]
  users:
    - name: Example
      id: 7
    - name: another_user
"""


class TestConfigModel:
    """Test configuration validation."""

    def test_defaults(self):
        config = UserParamConfigModel()
        assert config.namespaces["User"] == 2
        assert config.interwiki_prefixes == []
        assert config.max_name_length == 255
        assert config.invalid_username_characters == "@:>="
        assert "Maintenance script" in config.reserved_usernames
        assert (config.ismulti_limit1, config.ismulti_limit2) == (50, 500)
        assert config.users == []

    def test_user_namespace_required(self):
        with pytest.raises(ValueError, match="Namespace 'User'"):
            UserParamConfigModel(namespaces={"Benutzer": 2})
        with pytest.raises(ValueError, match="Namespace 'User'"):
            UserParamConfigModel(namespaces={"User": 5})

    def test_limits_order(self):
        with pytest.raises(ValueError, match="ismulti_limit2"):
            UserParamConfigModel(ismulti_limit1=100, ismulti_limit2=10)

    def test_seed_user_id_positive(self):
        with pytest.raises(ValueError):
            SeedUserModel(name="Example", id=0)


class TestParseConfig:
    """Test parsing of loaded documents."""

    def test_section(self):
        config = parse_config({"userparam": {"ismulti_limit1": 3}})
        assert config.ismulti_limit1 == 3

    def test_missing_section(self):
        assert parse_config({"other": 1}) == UserParamConfigModel()

    def test_not_a_mapping(self):
        with pytest.raises(ValueError, match="must be a mapping"):
            parse_config(["userparam"])
        with pytest.raises(ValueError, match="'userparam' section must be a mapping"):
            parse_config({"userparam": [1, 2]})

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="Invalid userparam config"):
            parse_config({"userparam": {"user_namespace": "Benutzer"}})


class TestLoadConfig:
    """Test locating and loading the config file."""

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text(CONFIG_YAML)

        config = load_config(path)
        assert config.interwiki_prefixes == ["meta"]
        assert config.ismulti_limit1 == 5
        assert config.users == [
            SeedUserModel(name="Example", id=7),
            SeedUserModel(name="another_user"),
        ]

    def test_missing_explicit_path(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_no_file_uses_defaults(self):
        assert find_config_path() is None
        assert load_config() == UserParamConfigModel()

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == UserParamConfigModel()

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("userparam: [unclosed")
        with pytest.raises(ValueError, match="Failed to parse YAML"):
            load_config(path)

    def test_env_var(self, tmp_path, monkeypatch):
        path = tmp_path / "from-env.yaml"
        path.write_text(CONFIG_YAML)
        monkeypatch.setenv("USERPARAM_CONFIG", str(path))

        assert find_config_path() == path
        assert load_config().ismulti_limit2 == 20

    def test_env_var_pointing_nowhere(self, tmp_path, monkeypatch):
        monkeypatch.setenv("USERPARAM_CONFIG", str(tmp_path / "missing.yaml"))
        with pytest.raises(FileNotFoundError):
            load_config()

    def test_home_before_cwd(self, tmp_path):
        """Test the lookup order: home directory config wins over ./userparam.yaml."""
        cwd_config = tmp_path / "userparam.yaml"
        cwd_config.write_text("userparam:\n  ismulti_limit1: 2\n")
        assert find_config_path().resolve() == cwd_config.resolve()
        assert load_config().ismulti_limit1 == 2

        home_config = tmp_path / "home" / ".userparam" / "config.yaml"
        home_config.parent.mkdir()
        home_config.write_text("userparam:\n  ismulti_limit1: 4\n")
        assert find_config_path().resolve() == home_config.resolve()
        assert load_config().ismulti_limit1 == 4

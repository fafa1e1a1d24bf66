"""Tests for settings loading."""

from pathlib import Path

import pytest
import yaml

from oca.config import OcaSettings, load_settings

SAMPLE_CONFIG = Path(__file__).parent.parent / "inputs" / "oca.yml"


def write_config(tmp_path, data) -> str:
    path = tmp_path / "oca.yml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return str(path)


class TestOcaSettings:
    """Test cases for the settings dataclass."""

    def test_defaults(self):
        settings = OcaSettings()
        assert settings.seed is None
        assert settings.turn_key == "c"
        assert settings.quit_key == "q"
        assert settings.log_path == "logs/oca"
        assert settings.alternate_screen is True

    def test_keys_are_normalized(self):
        settings = OcaSettings(turn_key=" T ", quit_key="X")
        assert settings.turn_key == "t"
        assert settings.quit_key == "x"

    def test_same_key_twice_is_rejected(self):
        with pytest.raises(ValueError, match="must differ"):
            OcaSettings(turn_key="q", quit_key="Q")

    def test_empty_key_is_rejected(self):
        with pytest.raises(ValueError, match="must not be empty"):
            OcaSettings(turn_key=" ")

    def test_overrides_skip_none(self):
        settings = OcaSettings(seed=5, turn_key="t")
        updated = settings.with_overrides(seed=None, turn_key=None, quit_key="z", verbose=True)
        assert updated.seed == 5
        assert updated.turn_key == "t"
        assert updated.quit_key == "z"
        assert updated.verbose is True
        assert settings.quit_key == "q"

    def test_overrides_are_validated(self):
        with pytest.raises(ValueError):
            OcaSettings().with_overrides(turn_key="q")


class TestLoadSettings:
    """Test cases for reading settings from YAML."""

    def test_no_file_gives_defaults(self):
        assert load_settings(None) == OcaSettings()

    def test_load_file(self, tmp_path):
        path = write_config(tmp_path, {"seed": 42, "turn_key": "t", "verbose": True})
        settings = load_settings(path)
        assert settings.seed == 42
        assert settings.turn_key == "t"
        assert settings.quit_key == "q"
        assert settings.verbose is True

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("")
        assert load_settings(str(path)) == OcaSettings()

    def test_values_are_coerced(self, tmp_path):
        path = tmp_path / "oca.yml"
        path.write_text("seed: '7'\nturn_key: 1\nquit_key: 2\nlog_path: 2024\n")
        settings = load_settings(str(path))
        assert settings.seed == 7
        assert settings.turn_key == "1"
        assert settings.quit_key == "2"
        assert settings.log_path == "2024"

    def test_empty_seed_is_random(self, tmp_path):
        path = tmp_path / "oca.yml"
        path.write_text("seed:\n")
        assert load_settings(str(path)).seed is None

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_settings(str(tmp_path / "nope.yml"))

    def test_unknown_keys(self, tmp_path):
        path = write_config(tmp_path, {"players": 6})
        with pytest.raises(ValueError, match="Unknown settings"):
            load_settings(path)

    def test_not_a_mapping(self, tmp_path):
        path = write_config(tmp_path, ["c", "q"])
        with pytest.raises(ValueError, match="mapping"):
            load_settings(path)

    def test_sample_config_loads(self):
        settings = load_settings(str(SAMPLE_CONFIG))
        assert settings == OcaSettings()

    def test_empty_log_path_is_rejected(self, tmp_path):
        path = tmp_path / "oca.yml"
        path.write_text("log_path:\nalternate_screen: false\n")
        with pytest.raises(ValueError, match="log_path"):
            load_settings(str(path))

    @pytest.mark.parametrize("key", ["turn_key", "quit_key"])
    def test_empty_command_key_is_rejected(self, tmp_path, key):
        path = tmp_path / "oca.yml"
        path.write_text(f"{key}:\n")
        with pytest.raises(ValueError, match="must not be empty"):
            load_settings(str(path))

    @pytest.mark.parametrize("key", ["verbose", "alternate_screen"])
    def test_quoted_bool_is_rejected(self, tmp_path, key):
        path = tmp_path / "oca.yml"
        path.write_text(f"{key}: 'false'\n")
        with pytest.raises(ValueError, match="true or false"):
            load_settings(str(path))

    @pytest.mark.parametrize("value", ["2.9", "'abc'", "true"])
    def test_non_integer_seed_is_rejected(self, tmp_path, value):
        path = tmp_path / "oca.yml"
        path.write_text(f"seed: {value}\n")
        with pytest.raises(ValueError, match="seed must be an integer"):
            load_settings(str(path))

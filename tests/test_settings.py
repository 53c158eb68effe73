"""Tests for acapella_index.config.settings."""

from pathlib import Path

import pytest
import yaml

from acapella_index.config.settings import IndexSettings, load_settings
from acapella_index.errors import AcapellaIndexError, ErrorCode


def _write_defaults(path: Path, data) -> Path:
    path.write_text(yaml.dump(data, default_flow_style=False), encoding="utf-8")
    return path


class TestLoadSettings:
    def test_bundled_defaults(self, tmp_path):
        settings = load_settings(base_dir=tmp_path)
        assert settings.root_dir == tmp_path / "acapella"
        assert settings.output_path == tmp_path / "library.json"
        assert settings.web_prefix == "acapella"
        assert settings.extensions == {".wav", ".mp3", ".aif", ".flac", ".ogg", ".m4a"}
        assert {"library.json", "generate_library.py"} <= settings.reserved_names

    def test_default_base_is_program_root(self, monkeypatch, tmp_path):
        monkeypatch.setattr("acapella_index.config.settings.program_root", lambda: tmp_path)
        assert load_settings().root_dir == tmp_path / "acapella"

    def test_custom_defaults_file(self, tmp_path):
        defaults = _write_defaults(
            tmp_path / "defaults.yaml",
            {
                "library_dir": "samples",
                "output_file": "index.json",
                "extensions": ["WAV", ".mp3"],
            },
        )
        settings = load_settings(base_dir=tmp_path, defaults_path=defaults)
        assert settings.web_prefix == "samples"
        assert settings.extensions == {".wav", ".mp3"}
        assert settings.reserved_names == {"index.json"}

    def test_missing_defaults_file(self, tmp_path):
        with pytest.raises(AcapellaIndexError) as exc_info:
            load_settings(base_dir=tmp_path, defaults_path=tmp_path / "absent.yaml")
        assert exc_info.value.code is ErrorCode.CONFIG_MISSING

    @pytest.mark.parametrize(
        "data",
        [
            ["not", "a", "mapping"],
            {"library_dir": "", "output_file": "x.json", "extensions": [".wav"]},
            {"library_dir": "a", "output_file": "x.json", "extensions": []},
            {"library_dir": "a", "output_file": "x.json", "extensions": "wav"},
            {"library_dir": "a", "output_file": 3, "extensions": [".wav"]},
        ],
    )
    def test_invalid_defaults(self, tmp_path, data):
        defaults = _write_defaults(tmp_path / "defaults.yaml", data)
        with pytest.raises(AcapellaIndexError) as exc_info:
            load_settings(base_dir=tmp_path, defaults_path=defaults)
        assert exc_info.value.code is ErrorCode.CONFIG_INVALID

    def test_unparseable_yaml(self, tmp_path):
        defaults = tmp_path / "defaults.yaml"
        defaults.write_text("library_dir: [unclosed", encoding="utf-8")
        with pytest.raises(AcapellaIndexError) as exc_info:
            load_settings(base_dir=tmp_path, defaults_path=defaults)
        assert exc_info.value.code is ErrorCode.CONFIG_INVALID


class TestIndexSettings:
    def test_derived_defaults(self, tmp_path):
        settings = IndexSettings(root_dir=str(tmp_path / "acapella"), output_path=tmp_path / "out.json")
        assert settings.root_dir == tmp_path / "acapella"
        assert settings.web_prefix == "acapella"
        assert ".flac" in settings.extensions
        assert "out.json" in settings.reserved_names

"""Tests for settings and the command line entry point."""

import json

import pytest
from pydantic import ValidationError

from dots_regions import main as main_module
from dots_regions.config import Settings
from dots_regions.engine import RegionDescriptor


class TestSettings:
    """Tests for rendering settings."""

    def test_defaults(self, render_settings):
        assert render_settings.cell_spacing == 24.0
        assert render_settings.corner_radius == 4.0
        assert render_settings.halo_distance == 8.0
        assert render_settings.normalize_winding is True
        assert render_settings.path_precision == 2
        assert render_settings.log_level == "info"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("DOTS_CELL_SPACING", "32")
        monkeypatch.setenv("DOTS_NORMALIZE_WINDING", "false")
        settings = Settings(_env_file=None)
        assert settings.cell_spacing == 32.0
        assert settings.normalize_winding is False

    @pytest.mark.parametrize("field", ["cell_spacing", "corner_radius", "halo_distance"])
    @pytest.mark.parametrize("value", ["inf", "nan"])
    def test_non_finite_values(self, field, value, monkeypatch):
        monkeypatch.setenv(f"DOTS_{field.upper()}", value)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    @pytest.mark.parametrize(
        "field, value",
        [
            ("cell_spacing", 0),
            ("cell_spacing", -24),
            ("corner_radius", -1),
            ("halo_distance", -0.5),
            ("path_precision", -1),
        ],
    )
    def test_invalid_values(self, field, value):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **{field: value})


class TestMain:
    """Tests for the snapshot rendering entry point."""

    @pytest.fixture
    def snapshot_file(self, tmp_path, staged_engine):
        path = tmp_path / "snapshot.json"
        path.write_text(json.dumps(staged_engine.to_dict()))
        return path

    def test_writes_svg_file(self, snapshot_file, tmp_path):
        output = tmp_path / "regions.svg"
        assert main_module.main([str(snapshot_file), str(output)]) == 0
        svg = output.read_text()
        assert svg.startswith("<svg ")
        assert 'fill="url(#player-1-pattern)"' in svg

    def test_writes_stdout(self, snapshot_file, capsys):
        assert main_module.main([str(snapshot_file)]) == 0
        assert "<svg " in capsys.readouterr().out

    def test_missing_snapshot(self, tmp_path):
        assert main_module.main([str(tmp_path / "missing.json")]) == 1

    def test_malformed_snapshot(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        assert main_module.main([str(path)]) == 1

    def test_usage(self):
        assert main_module.main([]) == 2

    def test_unreadable_region_shape(self, tmp_path, staged_engine):
        """A bad pre-rendered shape is skipped and the rest still renders."""
        staged_engine.add_region(RegionDescriptor(owner=1, shape="A 1 1"))
        snapshot = tmp_path / "snapshot.json"
        snapshot.write_text(json.dumps(staged_engine.to_dict()))
        output = tmp_path / "regions.svg"

        assert main_module.main([str(snapshot), str(output)]) == 0
        svg = output.read_text()
        assert svg.count("<g ") == 1
        assert 'fill="url(#player-1-pattern)"' in svg

    def test_unwritable_output(self, snapshot_file, tmp_path):
        assert main_module.main([str(snapshot_file), str(tmp_path)]) == 1

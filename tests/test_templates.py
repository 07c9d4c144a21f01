"""Unit tests for the recommendation template catalogue"""
import pytest
import yaml

from ergorisk import config
from ergorisk.exceptions import ConfigurationError
from ergorisk.models.risk_model import RiskLevel
from ergorisk.recommendations.templates import (
    REQUIRED_TEMPLATES,
    TEMPLATES_PATH,
    load_catalogue,
    recommendation_template,
    risk_level_guidance,
)


class TestTemplateCatalogue:
    """Test cases for the bundled and overridden catalogues"""

    def setup_method(self):
        load_catalogue.cache_clear()

    def teardown_method(self):
        load_catalogue.cache_clear()

    def test_bundled_catalogue_is_complete(self):
        catalogue = load_catalogue()
        for key in REQUIRED_TEMPLATES:
            assert key in catalogue.recommendations
        assert set(catalogue.risk_levels) == set(RiskLevel)

    def test_template_gets_requested_id(self):
        rec = recommendation_template("lighting", "rec_4")
        assert rec.id == "rec_4"
        assert rec.type.value == "environment"

    def test_critical_guidance_is_urgent(self):
        assert risk_level_guidance(RiskLevel.CRITICAL).urgency.startswith("URGENT")
        assert risk_level_guidance("low").follow_up_schedule == "Annual assessment or as needed"

    def test_missing_override_file(self, monkeypatch, tmp_path):
        monkeypatch.setattr(config, "TEMPLATES_PATH", str(tmp_path / "missing.yaml"))
        with pytest.raises(ConfigurationError):
            load_catalogue()

    def test_incomplete_override_file(self, monkeypatch, tmp_path):
        with open(TEMPLATES_PATH, "r") as f:
            raw = yaml.safe_load(f)
        del raw["recommendations"]["lighting"]
        path = tmp_path / "templates.yaml"
        path.write_text(yaml.safe_dump(raw))

        monkeypatch.setattr(config, "TEMPLATES_PATH", str(path))
        with pytest.raises(ConfigurationError, match="lighting"):
            load_catalogue()

    def test_invalid_override_entry(self, monkeypatch, tmp_path):
        with open(TEMPLATES_PATH, "r") as f:
            raw = yaml.safe_load(f)
        raw["recommendations"]["posture"]["priority"] = "whenever"
        path = tmp_path / "templates.yaml"
        path.write_text(yaml.safe_dump(raw))

        monkeypatch.setattr(config, "TEMPLATES_PATH", str(path))
        with pytest.raises(ConfigurationError):
            load_catalogue()


class TestConfig:
    """Test cases for get_config"""

    def test_defaults(self, monkeypatch):
        monkeypatch.setattr(config, "TEMPLATES_PATH", None)
        settings = config.get_config()
        assert set(settings) == {"log_level", "desk_height_ratio", "templates_path"}
        assert settings["templates_path"] is None
        assert settings["desk_height_ratio"] == config.DESK_HEIGHT_RATIO

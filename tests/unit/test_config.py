"""
Unit tests for configuration management module.
"""

import json
import os
from unittest.mock import patch

import pytest
import yaml

from gridboard.config import (
    WIDGET_TYPES,
    ConfigFileError,
    DashboardConfig,
    WidgetSpec,
    load_config_from_env,
)
from gridboard.dashboard import PeriodOverride, get_dashboard_body
from gridboard.widgets import (
    ColumnWidget,
    MetricView,
    MetricWidget,
    RowWidget,
    TextWidget,
    WidgetSizeError,
)


class TestWidgetSpec:
    """Tests for WidgetSpec dataclass."""

    def test_widget_types(self):
        assert WIDGET_TYPES == ("text", "metric", "row", "column")

    def test_from_dict_defaults(self):
        spec = WidgetSpec.from_dict({"type": "text"})
        assert spec.width == 6
        assert spec.height == 6
        assert spec.properties == {}
        assert spec.widgets == []

    def test_unknown_type(self):
        with pytest.raises(ConfigFileError, match="Unknown widget type 'alarm'"):
            WidgetSpec.from_dict({"type": "alarm"})

    def test_missing_type(self):
        with pytest.raises(ConfigFileError):
            WidgetSpec.from_dict({"width": 4})

    @pytest.mark.parametrize("key, value", [
        ("width", "6"),
        ("width", 6.5),
        ("height", None),
        ("height", True),
    ])
    def test_non_integer_size(self, key, value):
        with pytest.raises(ConfigFileError, match=f"{key} must be an integer"):
            WidgetSpec.from_dict({"type": "text", key: value})

    def test_properties_must_be_mapping(self):
        with pytest.raises(ConfigFileError, match="properties"):
            WidgetSpec.from_dict({"type": "text", "properties": ["markdown"]})

    def test_null_properties(self):
        assert WidgetSpec.from_dict({"type": "text", "properties": None}).properties == {}

    def test_widget_must_be_mapping(self):
        with pytest.raises(ConfigFileError, match="mapping"):
            WidgetSpec.from_dict({"type": "row", "widgets": ["text"]})

    def test_null_widgets(self):
        spec = WidgetSpec.from_dict({"type": "row", "widgets": None})
        assert spec.widgets == []
        assert spec.build().height == 0

    def test_widgets_must_be_list(self):
        with pytest.raises(ConfigFileError, match="'widgets' must be a list"):
            WidgetSpec.from_dict({"type": "column", "widgets": {"type": "text"}})

    def test_build_text(self):
        widget = WidgetSpec(type="text", width=24, height=2, properties={"markdown": "# Hi"}).build()
        assert isinstance(widget, TextWidget)
        assert widget.markdown == "# Hi"
        assert (widget.width, widget.height) == (24, 2)

    def test_build_metric(self):
        widget = WidgetSpec(
            type="metric",
            properties={
                "title": "CPU",
                "view": "singleValue",
                "period": 60,
                "metrics": [{"namespace": "AWS/EC2", "name": "CPUUtilization"}],
            },
        ).build()

        assert isinstance(widget, MetricWidget)
        assert widget.view is MetricView.SINGLE_VALUE
        assert widget.period == 60
        assert widget.metrics[0].namespace == "AWS/EC2"

    def test_build_metric_missing_name(self):
        spec = WidgetSpec(type="metric", properties={"metrics": [{"namespace": "AWS/EC2"}]})
        with pytest.raises(ConfigFileError, match="'name'"):
            spec.build()

    def test_build_invalid_size(self):
        with pytest.raises(WidgetSizeError):
            WidgetSpec(type="text", width=25).build()

    def test_build_nested(self):
        spec = WidgetSpec.from_dict({
            "type": "row",
            "widgets": [
                {"type": "column", "widgets": [{"type": "text"}, {"type": "text"}]},
                {"type": "text", "width": 18},
            ],
        })
        widget = spec.build()

        assert isinstance(widget, RowWidget)
        assert isinstance(widget.widgets[0], ColumnWidget)
        assert widget.height == 12

    def test_group_to_dict_omits_size(self):
        spec = WidgetSpec.from_dict({"type": "row", "widgets": [{"type": "text"}]})
        assert spec.to_dict() == {
            "type": "row",
            "widgets": [{"type": "text", "width": 6, "height": 6, "properties": {}}],
        }


class TestDashboardConfig:
    """Tests for DashboardConfig."""

    def test_defaults(self):
        config = DashboardConfig()
        assert config.name == "default"
        assert config.widgets == []
        assert config.to_dict() == {"name": "default", "widgets": []}

    def test_from_dict(self, sample_config_dict):
        config = DashboardConfig.from_dict(sample_config_dict)

        assert config.name == "api-overview"
        assert config.region == "eu-west-1"
        assert config.start == "-PT8H"
        assert len(config.widgets) == 2

    def test_round_trip(self, sample_config_dict):
        config = DashboardConfig.from_dict(sample_config_dict)
        assert DashboardConfig.from_dict(config.to_dict()).to_dict() == config.to_dict()

    def test_not_a_mapping(self):
        with pytest.raises(ConfigFileError, match="mapping"):
            DashboardConfig.from_dict(["widgets"])

    def test_null_widgets(self):
        config = DashboardConfig.from_dict({"name": "empty", "widgets": None})
        assert config.widgets == []

    def test_from_json(self, sample_config_dict):
        config = DashboardConfig.from_json(json.dumps(sample_config_dict))
        assert config.period_override == "auto"

    def test_to_args(self, sample_config_dict):
        args = DashboardConfig.from_dict(sample_config_dict).to_args()

        assert args.name == "api-overview"
        assert args.region == "eu-west-1"
        assert all(isinstance(w, RowWidget) for w in args.widgets)

    def test_body_from_config(self, sample_config_dict):
        body = get_dashboard_body(DashboardConfig.from_dict(sample_config_dict).to_args())

        assert body.period_override is PeriodOverride.AUTO
        assert [(w.type, w.x, w.y) for w in body.widgets] == [
            ("text", 0, 0),
            ("metric", 0, 2),
            ("metric", 12, 2),
        ]
        assert body.widgets[1].properties["region"] == "eu-west-1"


class TestConfigFiles:
    """Tests for loading and saving configuration files."""

    def test_yaml_file(self, tmp_path, sample_config_dict):
        path = tmp_path / "dashboard.yaml"
        path.write_text(yaml.safe_dump(sample_config_dict))

        config = DashboardConfig.from_file(str(path))
        assert config.to_dict() == DashboardConfig.from_dict(sample_config_dict).to_dict()

    def test_json_file(self, tmp_path, sample_config_dict):
        path = tmp_path / "dashboard.json"
        path.write_text(json.dumps(sample_config_dict))

        assert DashboardConfig.from_file(str(path)).name == "api-overview"

    @pytest.mark.parametrize("filename", ["out.yaml", "out.json"])
    def test_save_and_load(self, tmp_path, sample_config_dict, filename):
        config = DashboardConfig.from_dict(sample_config_dict)
        path = tmp_path / "nested" / filename
        config.save(str(path))

        assert DashboardConfig.from_file(str(path)).to_dict() == config.to_dict()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigFileError, match="Cannot read"):
            DashboardConfig.from_file(str(tmp_path / "missing.yaml"))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(ConfigFileError, match="Cannot parse"):
            DashboardConfig.from_file(str(path))

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("widgets: [unclosed")
        with pytest.raises(ConfigFileError, match="Cannot parse"):
            DashboardConfig.from_file(str(path))


class TestLoadConfigFromEnv:
    """Tests for load_config_from_env."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = load_config_from_env()
        assert config.name == "default"
        assert config.region is None

    def test_overrides(self, tmp_path, sample_config_dict):
        path = tmp_path / "dashboard.yaml"
        path.write_text(yaml.safe_dump(sample_config_dict))

        env = {
            "GRIDBOARD_CONFIG_FILE": str(path),
            "GRIDBOARD_REGION": "us-east-2",
            "GRIDBOARD_PERIOD_OVERRIDE": "inherit",
        }
        with patch.dict(os.environ, env, clear=True):
            config = load_config_from_env()

        assert config.name == "api-overview"
        assert config.region == "us-east-2"
        assert config.start == "-PT8H"
        assert config.period_override == "inherit"

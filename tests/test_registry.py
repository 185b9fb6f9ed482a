import pytest

from isee_config.initial import (
    DEFAULT_PANEL_COLORS,
    DEFAULT_REGISTRY,
    PanelRegistry,
    UnrecognizedPanelTypeError,
)


def test_default_registry_holds_isee_and_iseeu_panels():
    assert len(DEFAULT_REGISTRY) == 17
    assert DEFAULT_REGISTRY.color("ReducedDimensionPlot") == "#3565AA"
    assert DEFAULT_REGISTRY.color("MarkdownBoard") == "black"
    assert "VolcanoPlot" in DEFAULT_REGISTRY


def test_default_colors_are_read_only():
    with pytest.raises(TypeError):
        DEFAULT_PANEL_COLORS["FancyPlotPanel"] = "red"


def test_unknown_type_color_lookup_raises():
    with pytest.raises(UnrecognizedPanelTypeError) as excinfo:
        DEFAULT_REGISTRY.color("NotARealPanel")
    assert excinfo.value.panel_types == ("NotARealPanel",)


def test_extend_with_names_returns_new_registry():
    extended = DEFAULT_REGISTRY.extend(["FancyPlotPanel", "FancyTablePanel"])
    assert extended is not DEFAULT_REGISTRY
    assert "FancyPlotPanel" not in DEFAULT_REGISTRY
    assert extended.color("FancyPlotPanel") is None
    assert extended.color("ReducedDimensionPlot") == "#3565AA"
    assert len(extended) == 19


def test_extend_with_mapping_sets_colors():
    extended = DEFAULT_REGISTRY.extend(
        {"FancyPlotPanel": "orange", "MAPlot": "#000000"}
    )
    assert extended.color("FancyPlotPanel") == "orange"
    assert extended.color("MAPlot") == "#000000"


def test_extend_rejects_bare_string():
    with pytest.raises(TypeError, match="not a single str"):
        DEFAULT_REGISTRY.extend("FancyPlotPanel")


def test_registry_validates_entries():
    with pytest.raises(TypeError):
        PanelRegistry({"FancyPlotPanel": 3})

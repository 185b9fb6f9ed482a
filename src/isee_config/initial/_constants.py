"""Constants used by the ``initial`` configuration helpers.

Panel colors cover the panels shipped by default with iSEE and iSEEu. They
are display defaults only; custom panels can be allowed without a color.
"""

from types import MappingProxyType

# iSEE lays panels out on a 12-column grid.
GRID_COLUMNS = 12

# Selection source value for panels that do not receive selections.
NO_SELECTION = "---"

DEFAULT_PANEL_COLORS = MappingProxyType(
    {
        "ReducedDimensionPlot": "#3565AA",
        "FeatureAssayPlot": "#7BB854",
        "SampleAssayPlot": "#07A274",
        "ColumnDataPlot": "#DB0230",
        "ColumnDataTable": "#B00258",
        "RowDataPlot": "#F2B701",
        "RowDataTable": "#E47E04",
        "ComplexHeatmapPlot": "#440154FF",
        "AggregatedDotPlot": "#703737FF",
        "MarkdownBoard": "black",
        "DynamicMarkerTable": "#B73CE4",
        "DynamicReducedDimensionPlot": "#0F0F0F",
        "FeatureSetTable": "#BB00FF",
        "GeneSetTable": "#BB00FF",
        "LogFCLogFCPlot": "#770055",
        "MAPlot": "#666600",
        "VolcanoPlot": "#DEAE10",
    }
)

# Used by renderers for panels that have no registered color.
FALLBACK_COLOR = "lightgrey"
TILE_LEGEND_TITLE = "iSEE Panel type"

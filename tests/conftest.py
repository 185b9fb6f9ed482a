import matplotlib
import pytest
from loguru import logger

from isee_config.initial import PanelDescriptor, PanelSequence

matplotlib.use("Agg")


@pytest.fixture
def log_records():
    """Collect loguru records emitted during a test as ``(level, message)``."""
    records: list[tuple[str, str]] = []
    handler_id = logger.add(
        lambda message: records.append(
            (message.record["level"].name, message.record["message"])
        ),
        level="DEBUG",
    )
    yield records
    logger.remove(handler_id)


@pytest.fixture
def linked_initial() -> PanelSequence:
    return PanelSequence(
        [
            ("p1", PanelDescriptor("ReducedDimensionPlot", width=6)),
            ("p2", PanelDescriptor("FeatureAssayPlot", width=8, selection_source="p1")),
        ]
    )


@pytest.fixture
def default_initial() -> PanelSequence:
    return PanelSequence.from_panels(
        [
            PanelDescriptor("ReducedDimensionPlot", width=4),
            PanelDescriptor(
                "FeatureAssayPlot",
                width=4,
                selection_source="ReducedDimensionPlot1",
                params={"YAxisFeatureName": "ENSMUSG00000026581"},
            ),
            PanelDescriptor("ColumnDataPlot", width=4),
            PanelDescriptor(
                "RowDataTable", width=6, params={"Selected": "ENSMUSG00000026581"}
            ),
            PanelDescriptor("ComplexHeatmapPlot", width=6),
        ]
    )

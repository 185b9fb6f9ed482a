from collections.abc import Iterator
from dataclasses import dataclass, field

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Patch, Rectangle

from isee_config.initial._constants import (
    FALLBACK_COLOR,
    GRID_COLUMNS,
    TILE_LEGEND_TITLE,
)
from isee_config.initial._errors import OversizedPanelError
from isee_config.initial._panels import as_panel_sequence
from isee_config.initial._registry import DEFAULT_REGISTRY, PanelRegistry
from isee_config.preview._utils import _panel_color


@dataclass(frozen=True)
class TilePlacement:
    """Cells ``[start, stop)`` of the grid occupied by one panel."""

    panel_id: str
    panel_type: str
    color: str | None
    row: int
    start: int
    stop: int

    @property
    def width(self) -> int:
        return self.stop - self.start


@dataclass(frozen=True)
class TileCell:
    index: int
    row: int
    column: int
    panel_id: str | None
    panel_type: str | None
    color: str | None


@dataclass(frozen=True)
class TileGrid:
    """
    Panels laid out on rows of ``n_columns`` cells.

    Cells are addressed by absolute offset: cell ``i`` lies in row
    ``i // n_columns``. Cells not covered by any placement are empty.
    """

    n_rows: int
    placements: tuple[TilePlacement, ...] = ()
    n_columns: int = GRID_COLUMNS

    @property
    def n_cells(self) -> int:
        return self.n_rows * self.n_columns

    def _cell_array(self, attr: str) -> np.ndarray:
        out = np.full(self.n_cells, None, dtype=object)
        for placement in self.placements:
            out[placement.start : placement.stop] = getattr(placement, attr)
        return out

    @property
    def panel_ids(self) -> np.ndarray:
        return self._cell_array("panel_id")

    @property
    def panel_types(self) -> np.ndarray:
        return self._cell_array("panel_type")

    @property
    def colors(self) -> np.ndarray:
        return self._cell_array("color")

    def is_empty(self, cell: int) -> bool:
        if not 0 <= cell < self.n_cells:
            raise IndexError(f"cell {cell} out of range for {self.n_cells} cells.")
        return not any(p.start <= cell < p.stop for p in self.placements)

    def cells(self) -> Iterator[TileCell]:
        ids = self.panel_ids
        types = self.panel_types
        colors = self.colors
        for i in range(self.n_cells):
            yield TileCell(
                index=i,
                row=i // self.n_columns,
                column=i % self.n_columns,
                panel_id=ids[i],
                panel_type=types[i],
                color=colors[i],
            )

    def row_widths(self) -> list[int]:
        """Number of occupied cells in each row."""
        widths = [0] * self.n_rows
        for placement in self.placements:
            widths[placement.row] += placement.width
        return widths

    def to_frame(self) -> pd.DataFrame:
        """
        Long-format table with one record per cell.

        ``column`` and ``row`` are 1-based; empty cells have missing panel
        fields.
        """
        index = np.arange(self.n_cells)
        return pd.DataFrame(
            {
                "column": index % self.n_columns + 1,
                "row": index // self.n_columns + 1,
                "panel_id": self.panel_ids,
                "panel_type": self.panel_types,
                "color": self.colors,
            }
        )


@dataclass
class TilePacker:
    """
    Pack panels into rows of ``GRID_COLUMNS`` cells, in sequence order.

    A panel that does not fit in what is left of the current row starts a new
    row; the skipped cells stay empty and are never backfilled.
    """

    registry: PanelRegistry = field(default_factory=lambda: DEFAULT_REGISTRY)
    strict: bool = False

    def pack(self, sequence) -> TileGrid:
        sequence = as_panel_sequence(sequence)
        placements: list[TilePlacement] = []
        cursor = 0
        row = 0
        for panel_id, panel in sequence:
            width = panel.width
            if width > GRID_COLUMNS:
                raise OversizedPanelError(panel_id, width, GRID_COLUMNS)
            color = _panel_color(self.registry, panel_id, panel.panel_type, self.strict)

            row_end = (row + 1) * GRID_COLUMNS
            if cursor + width > row_end:
                row += 1
                cursor = row * GRID_COLUMNS
            placements.append(
                TilePlacement(
                    panel_id=panel_id,
                    panel_type=panel.panel_type,
                    color=color,
                    row=row,
                    start=cursor,
                    stop=cursor + width,
                )
            )
            cursor += width

        n_rows = row + 1 if placements else 0
        return TileGrid(n_rows=n_rows, placements=tuple(placements))


def pack_tiles(
    sequence,
    registry: PanelRegistry | None = None,
    strict: bool = False,
) -> TileGrid:
    """
    Lay out an ``initial`` configuration on the 12-column grid.

    Parameters
    ----------
    sequence
        The configuration, as accepted by ``as_panel_sequence``.
    registry
        Panel type registry used for tile colors. Defaults to the iSEE panels.
    strict
        Raise on panels of unregistered type instead of leaving them uncolored.

    Returns
    -------
    TileGrid
        The packed grid.

    Raises
    ------
    OversizedPanelError
        If a panel is wider than a row.
    UnrecognizedPanelTypeError
        If ``strict`` and a panel type is not registered.
    """
    return TilePacker(
        registry=DEFAULT_REGISTRY if registry is None else registry, strict=strict
    ).pack(sequence)


def plot_tiles(
    grid: TileGrid,
    ax: Axes | None = None,
    legend: bool = True,
    invert_rows: bool = True,
) -> Axes:
    """
    Draw a tile grid, one square per occupied cell.

    With ``invert_rows`` the first row is drawn on top, as panels appear in
    the app. Empty cells are left blank.
    """
    if ax is None:
        _, ax = plt.subplots()

    legend_handles: dict[str, Patch] = {}
    for placement in grid.placements:
        color = placement.color if placement.color is not None else FALLBACK_COLOR
        y = grid.n_rows - 1 - placement.row if invert_rows else placement.row
        for cell in range(placement.start, placement.stop):
            ax.add_patch(
                Rectangle(
                    (cell % grid.n_columns, y),
                    1,
                    1,
                    facecolor=color,
                    edgecolor="white",
                    linewidth=1.5,
                )
            )
        if placement.panel_type not in legend_handles:
            legend_handles[placement.panel_type] = Patch(
                facecolor=color, edgecolor="white", label=placement.panel_type
            )

    ax.set_xlim(0, grid.n_columns)
    ax.set_ylim(0, max(grid.n_rows, 1))
    ax.set_aspect("equal")
    ax.set_axis_off()
    if legend and legend_handles:
        ax.legend(
            handles=list(legend_handles.values()),
            title=TILE_LEGEND_TITLE,
            loc="upper center",
            bbox_to_anchor=(0.5, 0.0),
            ncol=min(3, len(legend_handles)),
            frameon=False,
        )
    return ax


def view_initial_tiles(
    sequence,
    registry: PanelRegistry | None = None,
    strict: bool = False,
) -> Figure:
    """
    Preview the layout of an ``initial`` configuration as a set of tiles.

    Tiles represent the panel types and reflect their widths. This gives a
    compact overview of a configuration without launching the app.

    Returns
    -------
    matplotlib.figure.Figure
        The figure holding the tile preview.
    """
    grid = pack_tiles(sequence, registry=registry, strict=strict)
    fig, ax = plt.subplots(figsize=(6, 0.6 * max(grid.n_rows, 1) + 1.5))
    plot_tiles(grid, ax=ax)
    return fig

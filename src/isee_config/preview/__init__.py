"""Compact previews of ``initial`` configurations: tiles and link networks."""

from typing import TYPE_CHECKING

import lazy_loader as lazy

if TYPE_CHECKING:
    from ._network import (
        LinkGraphBuilder,
        build_link_graph,
        network_figure,
        render_network,
        view_initial_network,
    )
    from ._tiles import (
        TileCell,
        TileGrid,
        TilePacker,
        TilePlacement,
        pack_tiles,
        plot_tiles,
        view_initial_tiles,
    )

__getattr__, __dir__, _ = lazy.attach(
    __name__,
    submod_attrs={
        "_network": [
            "LinkGraphBuilder",
            "build_link_graph",
            "network_figure",
            "render_network",
            "view_initial_network",
        ],
        "_tiles": [
            "TileCell",
            "TileGrid",
            "TilePacker",
            "TilePlacement",
            "pack_tiles",
            "plot_tiles",
            "view_initial_tiles",
        ],
    },
)

__all__ = [
    "LinkGraphBuilder",
    "TileCell",
    "TileGrid",
    "TilePacker",
    "TilePlacement",
    "build_link_graph",
    "network_figure",
    "pack_tiles",
    "plot_tiles",
    "render_network",
    "view_initial_network",
    "view_initial_tiles",
]

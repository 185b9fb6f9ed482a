"""isee_config package."""

from typing import TYPE_CHECKING

import lazy_loader as lazy

if TYPE_CHECKING:
    from . import initial, preview
    from .initial import (
        PanelDescriptor,
        PanelRegistry,
        PanelSequence,
        glue_initials,
        merge,
    )
    from .preview import (
        build_link_graph,
        pack_tiles,
        view_initial_network,
        view_initial_tiles,
    )

__getattr__, __dir__, _ = lazy.attach(
    __name__,
    submodules=["initial", "preview"],
    submod_attrs={
        "initial": [
            "PanelDescriptor",
            "PanelRegistry",
            "PanelSequence",
            "glue_initials",
            "merge",
        ],
        "preview": [
            "build_link_graph",
            "pack_tiles",
            "view_initial_network",
            "view_initial_tiles",
        ],
    },
)

__all__ = [
    "initial",
    "preview",
    "PanelDescriptor",
    "PanelRegistry",
    "PanelSequence",
    "build_link_graph",
    "glue_initials",
    "merge",
    "pack_tiles",
    "view_initial_network",
    "view_initial_tiles",
]

"""iSEE ``initial`` configurations: panels, panel types and merging."""

from typing import TYPE_CHECKING

import lazy_loader as lazy

if TYPE_CHECKING:
    from ._constants import (
        DEFAULT_PANEL_COLORS,
        FALLBACK_COLOR,
        GRID_COLUMNS,
        NO_SELECTION,
    )
    from ._errors import (
        InvalidInputError,
        OversizedPanelError,
        UnrecognizedPanelTypeError,
    )
    from ._glue import glue_initials, merge
    from ._panels import PanelDescriptor, PanelSequence, as_panel_sequence, same_panel
    from ._registry import DEFAULT_REGISTRY, PanelRegistry

__getattr__, __dir__, _ = lazy.attach(
    __name__,
    submod_attrs={
        "_constants": [
            "DEFAULT_PANEL_COLORS",
            "FALLBACK_COLOR",
            "GRID_COLUMNS",
            "NO_SELECTION",
        ],
        "_errors": [
            "InvalidInputError",
            "OversizedPanelError",
            "UnrecognizedPanelTypeError",
        ],
        "_glue": ["glue_initials", "merge"],
        "_panels": [
            "PanelDescriptor",
            "PanelSequence",
            "as_panel_sequence",
            "same_panel",
        ],
        "_registry": ["DEFAULT_REGISTRY", "PanelRegistry"],
    },
)

__all__ = [
    "DEFAULT_PANEL_COLORS",
    "DEFAULT_REGISTRY",
    "FALLBACK_COLOR",
    "GRID_COLUMNS",
    "InvalidInputError",
    "NO_SELECTION",
    "OversizedPanelError",
    "PanelDescriptor",
    "PanelRegistry",
    "PanelSequence",
    "UnrecognizedPanelTypeError",
    "as_panel_sequence",
    "glue_initials",
    "merge",
    "same_panel",
]

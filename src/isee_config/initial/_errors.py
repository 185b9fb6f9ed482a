from collections.abc import Iterable


class InvalidInputError(TypeError):
    """Raised when an object cannot be interpreted as a panel sequence."""


class UnrecognizedPanelTypeError(ValueError):
    """Raised when panels have a type outside the allowed registry."""

    def __init__(self, panel_types: Iterable[str], message: str | None = None):
        self.panel_types = tuple(panel_types)
        if message is None:
            message = (
                "Some elements included in the provided input are not recognized "
                f"as iSEE panels: {list(self.panel_types)}. Use "
                "`custom_panels_allowed` to allow custom panel types."
            )
        super().__init__(message)


class OversizedPanelError(ValueError):
    """Raised when a panel is wider than a full grid row."""

    def __init__(self, panel_id: str, width: int, capacity: int):
        self.panel_id = panel_id
        self.width = width
        super().__init__(
            f"Panel '{panel_id}' has width {width}, but a row only holds "
            f"{capacity} columns."
        )

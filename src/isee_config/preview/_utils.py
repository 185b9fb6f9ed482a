from loguru import logger

from isee_config.initial._errors import UnrecognizedPanelTypeError
from isee_config.initial._registry import PanelRegistry


def _panel_color(
    registry: PanelRegistry, panel_id: str, panel_type: str, strict: bool
) -> str | None:
    if panel_type in registry:
        return registry[panel_type]
    if strict:
        raise UnrecognizedPanelTypeError(
            [panel_type],
            f"Panel '{panel_id}' has unrecognized panel type '{panel_type}'.",
        )
    logger.warning(
        "Panel '{}' has unrecognized panel type '{}'; it is rendered without "
        "a registered color.",
        panel_id,
        panel_type,
    )
    return None

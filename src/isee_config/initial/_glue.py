from collections.abc import Iterable, Sequence
from typing import Any

from loguru import logger

from isee_config.initial._errors import InvalidInputError, UnrecognizedPanelTypeError
from isee_config.initial._panels import (
    PanelDescriptor,
    PanelSequence,
    as_panel_sequence,
    same_panel,
)
from isee_config.initial._registry import DEFAULT_REGISTRY, PanelRegistry
from isee_config.initial._utils import _normalize_type_names, _warn_duplicated_ids


def _drop_duplicate_panels(
    items: Sequence[tuple[str, PanelDescriptor]],
) -> tuple[list[tuple[str, PanelDescriptor]], int]:
    kept: list[tuple[str, PanelDescriptor]] = []
    n_dropped = 0
    for panel_id, panel in items:
        if any(same_panel(panel, other) for _, other in kept):
            n_dropped += 1
            continue
        kept.append((panel_id, panel))
    return kept, n_dropped


def merge(
    sequences: Sequence[Any],
    deduplicate: bool = True,
    allowed_types: str | Iterable[str] | None = None,
    verbose: bool = True,
    registry: PanelRegistry = DEFAULT_REGISTRY,
) -> PanelSequence:
    """
    Concatenate panel sequences into a single ``initial`` configuration.

    Parameters
    ----------
    sequences
        Ordered list of panel sequences (``PanelSequence``, mapping of
        identifiers to descriptors, list of ``(panel_id, descriptor)`` pairs,
        or list of descriptors named with iSEE defaults).
    deduplicate
        Drop panels identical to an earlier panel. The first occurrence is
        kept. Panels that only share an identifier are never dropped.
    allowed_types
        Extra panel type names accepted in the output, on top of the types
        of ``registry``.
    verbose
        Report the merge summary at INFO level. When ``False`` the same
        messages are logged at DEBUG level.
    registry
        Registry of known panel types.

    Returns
    -------
    PanelSequence
        The merged configuration.

    Raises
    ------
    InvalidInputError
        If ``sequences`` is not a list of panel sequences.
    UnrecognizedPanelTypeError
        If any panel type is neither registered nor in ``allowed_types``.
        Nothing is merged.
    """
    if not isinstance(sequences, (list, tuple)):
        raise InvalidInputError(
            "sequences must be a list of `initial` configurations, "
            f"got {type(sequences).__name__}."
        )
    # all inputs are checked before anything is merged
    configs = [as_panel_sequence(seq) for seq in sequences]
    allowed = registry.names | frozenset(
        _normalize_type_names(allowed_types, "allowed_types")
    )
    level = "INFO" if verbose else "DEBUG"

    logger.log(
        level,
        "Merging together {} `initial` configuration objects... "
        "Combining sets of {} different panels.",
        len(configs),
        ", ".join(str(len(config)) for config in configs),
    )

    concatenated = [item for config in configs for item in config]

    unknown: list[str] = []
    for _, panel in concatenated:
        if panel.panel_type not in allowed and panel.panel_type not in unknown:
            unknown.append(panel.panel_type)
    if unknown:
        raise UnrecognizedPanelTypeError(unknown)

    if deduplicate:
        glued, n_dropped = _drop_duplicate_panels(concatenated)
        logger.log(
            level,
            "Dropping {} of the original list of {} (detected as duplicated entries)",
            n_dropped,
            len(concatenated),
        )
    else:
        glued = concatenated

    result = PanelSequence(glued)
    if verbose:
        _warn_duplicated_ids(result.duplicated_ids())
    logger.log(
        level,
        "Returning an `initial` configuration including {} different panels. "
        "For a preview of the panels configuration, call `view_initial_tiles()` "
        "on the output of this function.",
        len(result),
    )
    return result


def glue_initials(
    *initials: Any,
    remove_duplicate_panels: bool = True,
    verbose: bool = True,
    custom_panels_allowed: str | Iterable[str] | None = None,
    registry: PanelRegistry = DEFAULT_REGISTRY,
) -> PanelSequence:
    """
    Glue together ``initial`` configurations into one.

    Parameters
    ----------
    *initials
        Configurations to concatenate, in order.
    remove_duplicate_panels
        Drop panels identical to an earlier panel.
    verbose
        Report what is done at INFO level.
    custom_panels_allowed
        Extra panel type names allowed in the output, e.g. the class names of
        custom panels such as ``["FancyPlotPanel", "FancyTablePanel"]``.
    registry
        Registry of known panel types, extended by ``custom_panels_allowed``.

    Returns
    -------
    PanelSequence
        The glued configuration.

    Notes
    -----
    iSEE renames panels sharing an identifier at runtime, so duplicated
    identifiers are only reported. Keep in mind that selection sources refer
    to panels by identifier.
    """
    return merge(
        list(initials),
        deduplicate=remove_duplicate_panels,
        allowed_types=custom_panels_allowed,
        verbose=verbose,
        registry=registry,
    )

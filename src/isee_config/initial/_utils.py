from collections.abc import Iterable

from loguru import logger


def _validate_width(width: int, name: str = "width") -> int:
    if isinstance(width, bool) or not isinstance(width, int):
        raise TypeError(f"{name} must be an int, got {type(width).__name__}.")
    if width < 1:
        raise ValueError(f"{name} must be >= 1, got {width}.")
    return width


def _normalize_type_names(
    names: str | Iterable[str] | None, name: str
) -> tuple[str, ...]:
    if names is None:
        return ()
    if isinstance(names, str):
        return (names,)
    out: list[str] = []
    for entry in names:
        if not isinstance(entry, str):
            raise TypeError(
                f"{name} entries must be str, got {type(entry).__name__}."
            )
        out.append(entry)
    return tuple(out)


def _warn_duplicated_ids(duplicated: list[str]) -> None:
    if duplicated:
        logger.warning(
            "Some panels are specified by the same name ({}), but this situation "
            "can be handled at runtime by iSEE (this is just a non-critical message).",
            ", ".join(duplicated),
        )

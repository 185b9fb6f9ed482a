from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from isee_config.initial._constants import DEFAULT_PANEL_COLORS
from isee_config.initial._errors import UnrecognizedPanelTypeError


class PanelRegistry(Mapping):
    """
    Read-only mapping of known panel types to their display color.

    Custom panel types can be registered without a color (``None``); they are
    valid panels but render with a neutral fallback color.
    """

    def __init__(self, colors: Mapping[str, str | None] | None = None):
        colors = DEFAULT_PANEL_COLORS if colors is None else colors
        checked: dict[str, str | None] = {}
        for name, color in colors.items():
            if not isinstance(name, str) or not name:
                raise TypeError("Panel type names must be non-empty str.")
            if color is not None and not isinstance(color, str):
                raise TypeError(
                    f"Color for panel type '{name}' must be a str or None."
                )
            checked[name] = color
        self._colors = MappingProxyType(checked)

    def __getitem__(self, panel_type: str) -> str | None:
        return self._colors[panel_type]

    def __iter__(self) -> Iterator[str]:
        return iter(self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    def __repr__(self) -> str:
        return f"PanelRegistry({list(self._colors)!r})"

    @property
    def names(self) -> frozenset[str]:
        return frozenset(self._colors)

    def color(self, panel_type: str) -> str | None:
        """
        Return the display color of ``panel_type``.

        Raises
        ------
        UnrecognizedPanelTypeError
            If ``panel_type`` is not registered.
        """
        if panel_type not in self._colors:
            raise UnrecognizedPanelTypeError([panel_type])
        return self._colors[panel_type]

    def extend(
        self, extra: Iterable[str] | Mapping[str, str | None] | None
    ) -> "PanelRegistry":
        """
        Return a new registry with ``extra`` panel types added.

        ``extra`` is either an iterable of type names, registered without a
        color, or a mapping of type names to colors. Existing colors are kept
        unless ``extra`` maps the name to a color explicitly.
        """
        if extra is None:
            return self
        if isinstance(extra, str):
            raise TypeError(
                "extra must be an iterable of panel type names, not a single str."
            )
        merged = dict(self._colors)
        if isinstance(extra, Mapping):
            merged.update(extra)
        else:
            for name in extra:
                merged.setdefault(name, None)
        return PanelRegistry(merged)


DEFAULT_REGISTRY = PanelRegistry(DEFAULT_PANEL_COLORS)

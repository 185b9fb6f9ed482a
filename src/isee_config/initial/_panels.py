from collections import Counter
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from isee_config.initial._constants import NO_SELECTION
from isee_config.initial._errors import InvalidInputError
from isee_config.initial._utils import _validate_width

# Alternative spellings accepted by ``PanelDescriptor.from_mapping``.
_TYPE_KEYS = ("panel_type", "type")
_WIDTH_KEYS = ("width", "PanelWidth")
_SOURCE_KEYS = ("selection_source", "ColumnSelectionSource")


@dataclass(frozen=True)
class PanelDescriptor:
    """
    Description of a single panel in an iSEE ``initial`` configuration.

    Parameters
    ----------
    panel_type
        Panel kind, e.g. ``"ReducedDimensionPlot"``.
    width
        Horizontal span of the panel on the 12-column grid.
    selection_source
        Identifier of the panel this panel receives column selections from,
        or ``"---"`` when it receives none.
    params
        Any other panel settings. They take part in duplicate detection but
        are otherwise passed through untouched.
    """

    panel_type: str
    width: int = 4
    selection_source: str = NO_SELECTION
    params: Mapping[str, Any] = field(default_factory=dict)

    # params is a plain dict
    __hash__ = None

    def __post_init__(self):
        if not isinstance(self.panel_type, str) or not self.panel_type:
            raise TypeError("panel_type must be a non-empty str.")
        _validate_width(self.width)
        if not isinstance(self.selection_source, str):
            raise TypeError("selection_source must be a str.")
        object.__setattr__(self, "params", dict(self.params))

    @property
    def has_selection_source(self) -> bool:
        return self.selection_source != NO_SELECTION

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "PanelDescriptor":
        """
        Build a descriptor from a plain mapping.

        Type, width and selection source may be given either with their field
        names or with the iSEE slot names (``PanelWidth``,
        ``ColumnSelectionSource``); ``type`` is accepted for ``panel_type``.
        Remaining keys end up in ``params``.
        """
        if not isinstance(mapping, Mapping):
            raise InvalidInputError(
                f"Expected a mapping of panel settings, got {type(mapping).__name__}."
            )
        remaining = dict(mapping)

        def _pop_first(keys: tuple[str, ...]) -> Any:
            found = [k for k in keys if k in remaining]
            if len(found) > 1:
                raise InvalidInputError(
                    f"Panel settings contain more than one of {list(found)}."
                )
            return remaining.pop(found[0]) if found else None

        panel_type = _pop_first(_TYPE_KEYS)
        if panel_type is None:
            raise InvalidInputError(
                f"Panel settings must define one of {list(_TYPE_KEYS)}."
            )
        kwargs: dict[str, Any] = {"panel_type": panel_type}
        width = _pop_first(_WIDTH_KEYS)
        if width is not None:
            kwargs["width"] = width
        source = _pop_first(_SOURCE_KEYS)
        if source is not None:
            kwargs["selection_source"] = source
        nested = remaining.pop("params", None)
        params = dict(nested) if isinstance(nested, Mapping) else {}
        params.update(remaining)
        return cls(**kwargs, params=params)

    def to_dict(self) -> dict[str, Any]:
        out = dict(self.params)
        out.update(
            panel_type=self.panel_type,
            width=self.width,
            selection_source=self.selection_source,
        )
        return out


def same_panel(a: PanelDescriptor, b: PanelDescriptor) -> bool:
    """
    Return True when two descriptors describe the same panel.

    Panel identifiers are not compared: two panels configured identically are
    duplicates even when they carry different names.
    """
    return (
        a.panel_type == b.panel_type
        and a.width == b.width
        and a.selection_source == b.selection_source
        and dict(a.params) == dict(b.params)
    )


class PanelSequence(Sequence):
    """
    Ordered collection of ``(panel_id, PanelDescriptor)`` pairs.

    This is the Python counterpart of an iSEE ``initial`` list. Order drives
    the tile layout. Identifiers should be unique, but duplicates are kept
    as given since iSEE renames them at runtime.
    """

    def __init__(self, items: Iterable[tuple[str, PanelDescriptor]] = ()):
        pairs: list[tuple[str, PanelDescriptor]] = []
        for item in items:
            if not isinstance(item, tuple) or len(item) != 2:
                raise InvalidInputError(
                    "PanelSequence entries must be (panel_id, PanelDescriptor) pairs."
                )
            panel_id, panel = item
            if not isinstance(panel_id, str):
                raise InvalidInputError(
                    f"Panel identifiers must be str, got {type(panel_id).__name__}."
                )
            if not isinstance(panel, PanelDescriptor):
                raise InvalidInputError(
                    f"Panel '{panel_id}' is not a PanelDescriptor "
                    f"(got {type(panel).__name__})."
                )
            pairs.append((panel_id, panel))
        self._items = tuple(pairs)

    @classmethod
    def from_panels(cls, panels: Iterable[PanelDescriptor]) -> "PanelSequence":
        """
        Name panels the way iSEE does by default: panel type followed by a
        per-type counter, e.g. ``ReducedDimensionPlot1``.
        """
        counts: Counter[str] = Counter()
        items = []
        for panel in panels:
            if not isinstance(panel, PanelDescriptor):
                raise InvalidInputError(
                    f"Expected PanelDescriptor, got {type(panel).__name__}."
                )
            counts[panel.panel_type] += 1
            items.append((f"{panel.panel_type}{counts[panel.panel_type]}", panel))
        return cls(items)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return PanelSequence(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[tuple[str, PanelDescriptor]]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PanelSequence):
            return NotImplemented
        return len(self) == len(other) and all(
            id_a == id_b and same_panel(a, b)
            for (id_a, a), (id_b, b) in zip(self, other)
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"PanelSequence({list(self.ids)!r})"

    @property
    def ids(self) -> tuple[str, ...]:
        return tuple(panel_id for panel_id, _ in self._items)

    @property
    def panels(self) -> tuple[PanelDescriptor, ...]:
        return tuple(panel for _, panel in self._items)

    def items(self) -> tuple[tuple[str, PanelDescriptor], ...]:
        return self._items

    def get(self, panel_id: str) -> PanelDescriptor | None:
        for pid, panel in self._items:
            if pid == panel_id:
                return panel
        return None

    def duplicated_ids(self) -> list[str]:
        """Identifiers used more than once, in first-seen order."""
        counts = Counter(self.ids)
        seen: set[str] = set()
        out: list[str] = []
        for panel_id in self.ids:
            if counts[panel_id] > 1 and panel_id not in seen:
                seen.add(panel_id)
                out.append(panel_id)
        return out


def as_panel_sequence(obj: Any) -> PanelSequence:
    """
    Coerce ``obj`` to a :class:`PanelSequence`.

    Accepts a ``PanelSequence``, a mapping of identifiers to descriptors, a
    list/tuple of ``(panel_id, descriptor)`` pairs, or a list/tuple of
    descriptors, which get iSEE default identifiers (see
    :meth:`PanelSequence.from_panels`).

    Raises
    ------
    InvalidInputError
        If ``obj`` has any other shape.
    """
    if isinstance(obj, PanelSequence):
        return obj
    if isinstance(obj, Mapping):
        return PanelSequence(obj.items())
    if isinstance(obj, (list, tuple)):
        if obj and all(isinstance(entry, PanelDescriptor) for entry in obj):
            return PanelSequence.from_panels(obj)
        return PanelSequence(obj)
    raise InvalidInputError(
        "You need to provide a set of `initial` configuration lists for iSEE, "
        f"got {type(obj).__name__}."
    )

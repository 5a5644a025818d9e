"""Valid device names per category.

Names are case-sensitive literals. A name may belong to more than one
category ("oven" is both an appliance and a thermal device); the verb that
addresses a device decides which category is consulted.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Union

from domolect.domain.models import DeviceCategory

DEFAULT_DEVICES: Dict[str, tuple] = {
    DeviceCategory.LIGHT_SOURCE.value: (
        "lamp", "bulb", "neon", "sconce", "brazier",
    ),
    DeviceCategory.BARRIER.value: (
        "gate", "curtains", "garage-door", "blinds", "window", "shutter",
        "trapdoor", "portcullis", "drawbridge", "blast-door", "airlock",
    ),
    DeviceCategory.APPLIANCE.value: (
        "coffee-maker", "oven", "air-conditioner", "centrifuge",
        "synchrotron", "laser-cannon",
    ),
    DeviceCategory.THERMAL_DEVICE.value: (
        "oven", "thermostat", "electric-blanket", "incinerator", "reactor-core",
    ),
}


def _category_key(category: Union[str, DeviceCategory]) -> str:
    if isinstance(category, DeviceCategory):
        return category.value
    return str(category)


class Vocabulary:
    """Immutable mapping from category to the set of device names in it."""

    def __init__(self, table: Mapping[Union[str, DeviceCategory], Iterable[str]]):
        # Never aliases the caller's name containers
        self._table = MappingProxyType(
            {_category_key(category): frozenset(names) for category, names in table.items()}
        )

    @classmethod
    def from_mapping(cls, mapping: Mapping[Union[str, DeviceCategory], Iterable[str]]) -> "Vocabulary":
        return cls(mapping)

    @classmethod
    def default(cls) -> "Vocabulary":
        return cls.from_mapping(DEFAULT_DEVICES)

    def contains(self, category: Union[str, DeviceCategory], name: str) -> bool:
        """True if ``name`` is a device of ``category``. Unknown categories hold nothing."""
        return name in self._table.get(_category_key(category), frozenset())

    def names(self, category: Union[str, DeviceCategory]) -> FrozenSet[str]:
        return self._table.get(_category_key(category), frozenset())

    @property
    def categories(self) -> FrozenSet[str]:
        return frozenset(self._table)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vocabulary):
            return NotImplemented
        return dict(self._table) == dict(other._table)

    def __hash__(self) -> int:
        return hash(frozenset(self._table.items()))

    def __repr__(self) -> str:
        sizes = ", ".join(f"{c}={len(n)}" for c, n in sorted(self._table.items()))
        return f"Vocabulary({sizes})"

from __future__ import annotations
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Sequence, Tuple

from ..core.errors import TableFormatError
from ..core.types import Proper, TypeDescriptor


class TypeCatalog:
    """Read-only descriptor table keyed by type code."""

    def __init__(self, descriptors: Iterable[TypeDescriptor]):
        by_type: Dict[int, TypeDescriptor] = {}
        for desc in descriptors:
            if desc.type in by_type:
                raise TableFormatError(f"Duplicate type descriptor for type {desc.type}")
            by_type[desc.type] = desc
        self._by_type: Mapping[int, TypeDescriptor] = MappingProxyType(by_type)

    def __len__(self) -> int:
        return len(self._by_type)

    def __contains__(self, code: object) -> bool:
        return code in self._by_type

    def codes(self) -> Tuple[int, ...]:
        return tuple(sorted(self._by_type))

    def describe(self, code: int) -> Optional[TypeDescriptor]:
        return self._by_type.get(code)

    def name(self, code: int) -> str:
        desc = self.describe(code)
        return desc.name if desc is not None else f"Type {code}"

    def is_reading(self, code: int) -> bool:
        desc = self.describe(code)
        return desc is not None and desc.is_reading

    def is_viewable(self, code: int) -> bool:
        # unknown codes stay visible
        desc = self.describe(code)
        return desc is None or desc.is_viewable


def find_proper_by_type(propers: Optional[Sequence[Proper]], code: int) -> Optional[Proper]:
    for p in propers or ():
        if p.type == code:
            return p
    return None

def has_readings(propers: Optional[Sequence[Proper]], catalog: TypeCatalog) -> bool:
    return any(catalog.is_reading(p.type) and p.text for p in propers or ())

def viewable(propers: Sequence[Proper], catalog: TypeCatalog) -> Tuple[Proper, ...]:
    return tuple(p for p in propers if catalog.is_viewable(p.type))

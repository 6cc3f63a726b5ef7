"""
Constant reference table and ``{@value owner#field}`` resolution.

The table is built once per run from every class being documented, before
any description is resolved, and is read-only afterwards. A description in
one class may reference a constant declared in any other class.
"""

import logging
import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Optional, Union

from fixturedoc.schemas import ClassModel

logger = logging.getLogger(__name__)

ConstantValue = Union[bool, int, float, str]

VALUE_REFERENCE_PATTERN = re.compile(r"\{@value\s+([^{}\s]+)\s*\}")


def constant_key(owner: str, field: str) -> str:
    """Lookup key of a constant: ``<qualified owner>#<field>``."""
    return f"{owner}#{field}"


class ConstantTable(Mapping):
    """Immutable snapshot of public constants, keyed by ``owner#field``."""

    def __init__(self, values: Optional[Mapping] = None):
        self._values = MappingProxyType(dict(values or {}))

    @classmethod
    def from_classes(cls, classes: Iterable[ClassModel]) -> "ConstantTable":
        """
        Collect the public compile-time constants of all classes.

        Nested classes are included; supertype chains are not, a constant
        is registered under the class that declares it.
        """
        values: Dict[str, ConstantValue] = {}
        for class_model in _walk(classes):
            for constant in class_model.constants:
                if constant.is_public and constant.is_constant and constant.value is not None:
                    values[constant_key(class_model.qualified_name, constant.name)] = constant.value

        logger.debug(f"Constant table holds {len(values)} entries")
        return cls(values)

    def __getitem__(self, key: str) -> ConstantValue:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ConstantTable({dict(self._values)!r})"


def _walk(classes: Iterable[ClassModel]) -> Iterator[ClassModel]:
    """Classes and, depth first, their nested classes."""
    for class_model in classes:
        yield class_model
        yield from _walk(class_model.nested)


def resolve_value_reference(description: str, table: Mapping) -> str:
    """
    Replace a ``{@value owner#field}`` marker with the constant's value.

    Unknown references leave the description untouched.

    Examples:
        >>> resolve_value_reference("Max is {@value Config#MAX}", {"Config#MAX": "10"})
        'Max is 10'
    """
    match = VALUE_REFERENCE_PATTERN.search(description)
    if not match:
        return description

    reference = match.group(1)
    if reference not in table:
        logger.debug(f"Unresolved constant reference: {reference}")
        return description

    return description.replace(match.group(0), str(table[reference]))

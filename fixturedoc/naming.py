"""
Identifier and type-name helpers.

Turns mixed-case identifiers into readable lowercase words and reduces
qualified type names to the simple names shown in fixture help.
"""

import re
from typing import List

# Boundaries are lookarounds only, so every insertion point is taken
# against the unmodified input in a single scan.
CAMEL_CASE_BOUNDARY = re.compile(
    "|".join([
        r"(?<=[A-Z])(?=[A-Z][a-z])",
        r"(?<=[^A-Z])(?=[A-Z])",
        r"(?<=[A-Za-z])(?=[^A-Za-z])",
    ])
)

DOTTED_NAME = re.compile(r"[A-Za-z_][\w.]*")


def split_camel_case(identifier: str) -> str:
    """
    Split a mixed-case identifier into space separated lowercase words.

    Examples:
        >>> split_camel_case("HTTPRequestSender")
        'http request sender'
        >>> split_camel_case("setValue2")
        'set value 2'
    """
    return CAMEL_CASE_BOUNDARY.sub(" ", identifier).lower()


def readable_name(identifier: str) -> str:
    """
    Readable form of an identifier.

    Underscore separated parts (Python style names) are fragmented one by
    one, so ``set_value`` and ``setValue`` both read ``set value``.
    """
    parts = [part for part in identifier.split("_") if part]
    return " ".join(split_camel_case(part) for part in parts)


def name_words(identifier: str) -> List[str]:
    """Words of the readable name; empty for an empty identifier."""
    return readable_name(identifier).split()


def simple_type_name(type_name: str) -> str:
    """
    Reduce every qualified name in a type expression to its last component.

    Angle brackets of generic types are HTML escaped since the consumers
    render help text as HTML.

    Examples:
        >>> simple_type_name("java.util.List<java.lang.String>")
        'List&lt;String&gt;'
        >>> simple_type_name("typing.Optional[shop.model.Item]")
        'Optional[Item]'
    """
    simple = DOTTED_NAME.sub(lambda m: m.group(0).rsplit(".", 1)[-1], type_name.strip())
    return simple.replace("<", "&lt;").replace(">", "&gt;")

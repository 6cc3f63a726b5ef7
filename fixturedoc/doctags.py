"""
Doc comment tag parsing and merging.

Doc comments follow the block tag convention::

    Adds an item to the cart.

    @param sku article number
    @param amount how many, at most {@value shop.Config#MAX_ITEMS}
    @return true when the cart accepted the item
    @throws CartFullError when the cart is full
    @deprecated use addItems instead

A block tag starts a line; following lines up to the next block tag are
continuation text.
"""

import re
from typing import Iterable, List, Optional

from fixturedoc.schemas import DocTag

BLOCK_TAG_PATTERN = re.compile(r"^\s*@(\w+)\b[ \t]*(.*)$")

# Tags whose first word is the associated name
NAMED_TAG_KINDS = {"param", "throws"}

TAG_ALIASES = {
    "returns": "return",
    "raises": "throws",
    "exception": "throws",
}

DEPRECATED_PREFIX = "<b>Deprecated:</b> "
LINE_BREAK = "\r\n"


def parse_doc_tags(doc_comment: Optional[str]) -> List[DocTag]:
    """
    Parse the block tags of a doc comment.

    Args:
        doc_comment: Raw doc comment text (None is treated as empty)

    Returns:
        Tags in the order they appear
    """
    tags: List[DocTag] = []
    if not doc_comment:
        return tags

    current_kind = None
    current_lines: List[str] = []

    for line in doc_comment.splitlines():
        match = BLOCK_TAG_PATTERN.match(line)
        if match:
            if current_kind is not None:
                tags.append(_make_tag(current_kind, current_lines))
            current_kind = match.group(1)
            current_lines = [match.group(2)]
        elif current_kind is not None:
            current_lines.append(line)

    if current_kind is not None:
        tags.append(_make_tag(current_kind, current_lines))

    return tags


def _make_tag(raw_kind: str, lines: List[str]) -> DocTag:
    """Build a DocTag from the tag name and its text lines."""
    kind = TAG_ALIASES.get(raw_kind.lower(), raw_kind.lower())
    text = " ".join(line.strip() for line in lines if line.strip())

    name = None
    if kind in NAMED_TAG_KINDS:
        parts = text.split(None, 1)
        name = parts[0] if parts else ""
        text = parts[1] if len(parts) > 1 else ""

    return DocTag(kind=kind, name=name, text=text)


def find_tag(tags: Iterable[DocTag], kind: str) -> Optional[DocTag]:
    """First tag of the given kind, or None."""
    return next((tag for tag in tags if tag.kind == kind), None)


def param_description(tags: Iterable[DocTag], param_name: str) -> Optional[str]:
    """Text of the first ``@param`` tag naming exactly ``param_name``."""
    for tag in tags:
        if tag.kind == "param" and tag.name == param_name:
            return tag.text
    return None


def return_description(tags: Iterable[DocTag]) -> Optional[str]:
    """Text of the ``@return`` tag, if any."""
    tag = find_tag(tags, "return")
    return tag.text if tag else None


def thrown_types(tags: Iterable[DocTag]) -> List[str]:
    """Type names listed by ``@throws`` tags."""
    return [tag.name for tag in tags if tag.kind == "throws" and tag.name]


def merge_deprecation(doc_string: str, tags: Iterable[DocTag]) -> str:
    """
    Append the deprecation notice to a doc string.

    Only the first ``@deprecated`` tag is used. A line break separates the
    notice from a non-empty doc string.

    Examples:
        >>> merge_deprecation("", [DocTag(kind="deprecated", text="use X instead")])
        '<b>Deprecated:</b> use X instead'
    """
    tag = find_tag(tags, "deprecated")
    if tag is None:
        return doc_string

    line_break = LINE_BREAK if doc_string else ""
    return f"{doc_string}{line_break}{DEPRECATED_PREFIX}{tag.text}"

"""
Usage template synthesis and resolution.

A usage template is the pipe delimited table row a keyword driven test uses
to invoke an operation, for example ``| set | [amount] | value |``. Name
fragments and ``[param]`` placeholders are interleaved so the row reads like
a sentence. An author can override the generated row by writing an explicit
``Usage: | ... |`` sentence in the doc comment.
"""

import re
from typing import Optional, Sequence

from fixturedoc.naming import name_words, readable_name

# Greedy lead-in: the last "usage:" in the text wins.
USAGE_PATTERN = re.compile(
    r".*usage:\s(\|[\w\s|()\[\]\\]+\|)",
    re.IGNORECASE | re.DOTALL | re.ASCII,
)

# The leading pipe is optional: adjacent placeholders share one pipe.
PLACEHOLDER_CELL = re.compile(r"(?:\| )?\[(\w+)] \|")


def synthesize_method_usage(words: Sequence[str], params: Sequence[str]) -> str:
    """
    Build a usage template from name words and parameter names.

    With more parameters than words, all words come first and the parameters
    share a single comma separated cell. Otherwise parameters take the odd
    cells counted from the back, two cells apart, so they trail the words
    they belong to:

        >>> synthesize_method_usage(["set", "value"], ["amount"])
        '| set | [amount] | value |'
        >>> synthesize_method_usage(["do", "it"], [])
        '| do it |'

    Args:
        words: Fragmented name words in order
        params: Parameter names in declaration order

    Returns:
        Usage template starting with ``"| "``
    """
    if len(params) > len(words):
        return "| " + " ".join(words) + " | " + ", ".join(params) + " |"

    total_cells = len(words) + len(params)
    last_odd = total_cells - 1 if total_cells % 2 == 0 else total_cells - 2
    param_positions = {last_odd - 2 * n for n in range(len(params))}

    result = ["| "]
    word_index = 0
    param_index = 0
    ends_with_word = False
    for cell in range(total_cells):
        if cell in param_positions:
            result.append(f"| [{params[param_index]}] | ")
            param_index += 1
            ends_with_word = False
        else:
            result.append(f"{words[word_index]} ")
            word_index += 1
            ends_with_word = True

    if ends_with_word or total_cells == 0:
        result.append("|")
    return "".join(result)


def synthesize_constructor_usage(type_name: str, params: Sequence[str]) -> str:
    """
    Build the usage template of a constructor.

    The readable type name is the only leading cell, followed by one
    placeholder per parameter.

        >>> synthesize_constructor_usage("CartFixture", ["owner"])
        '| cart fixture | [owner] |'
    """
    usage = f"| {readable_name(type_name)} |"
    for param in params:
        usage += f" [{param}] |"
    return usage


def extract_usage(doc_text: Optional[str]) -> Optional[str]:
    """
    Find an author supplied usage template in a doc comment.

    Returns:
        The template exactly as written, or None when the text has none
    """
    if not doc_text:
        return None
    match = USAGE_PATTERN.match(doc_text)
    return match.group(1) if match else None


def resolve_method_usage(name: str, params: Sequence[str], doc_text: Optional[str] = "") -> str:
    """Usage template of a method: the authored one, else a synthesized one."""
    authored = extract_usage(doc_text)
    if authored is not None:
        return authored
    return synthesize_method_usage(name_words(name), list(params))


def resolve_constructor_usage(type_name: str, params: Sequence[str], doc_text: Optional[str] = "") -> str:
    """Usage template of a constructor: the authored one, else a synthesized one."""
    authored = extract_usage(doc_text)
    if authored is not None:
        return authored
    return synthesize_constructor_usage(type_name, list(params))


def context_help(usage: str) -> str:
    """
    Flatten a usage template into plain help text.

        >>> context_help("| set | [amount] | value |")
        'set <amount> value'
        >>> context_help("| cart fixture | [owner] | [size] |")
        'cart fixture <owner> <size>'
    """
    return PLACEHOLDER_CELL.sub(r"<\1>", usage[2:]).replace("|", "").strip()

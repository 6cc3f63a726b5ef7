"""
fixturedoc - keyword help records for fixture classes.

Extracts documentation metadata from fixture classes and writes one JSON
record per class, with a usage template and context help for every public
constructor and method.

Main Components:
- Introspection: Python and JSON entity model adapters
- Naming: readable names from mixed-case identifiers
- Usage: usage template synthesis, authored template extraction, context help
- Doc tags: @param/@return/@deprecated/@throws parsing and merging
- Constants: {@value owner#field} resolution
- Generator: orchestrates assembly and writing

Usage:
    from pathlib import Path
    from fixturedoc import FixtureDocGenerator
    from fixturedoc.introspection import PythonModelAdapter

    classes = PythonModelAdapter().load_modules(["shop.fixtures"])
    summary = FixtureDocGenerator(Path("build/fixture-docs")).generate(classes)
"""

from .schemas import (
    # Entity model
    DocTag,
    ParameterModel,
    ExecutableModel,
    ConstantModel,
    ClassModel,
    EntityModel,

    # Output records
    ParameterRecord,
    ConstructorRecord,
    MethodRecord,
    ClassRecord,
    GenerationSummary,
)

from .constants import ConstantTable, resolve_value_reference
from .assembler import RecordAssembler
from .generator import FixtureDocGenerator, generate_fixture_docs
from .naming import split_camel_case, readable_name
from .usage import (
    synthesize_method_usage,
    synthesize_constructor_usage,
    extract_usage,
    resolve_method_usage,
    resolve_constructor_usage,
    context_help,
)

__all__ = [
    # Main generator
    "FixtureDocGenerator",
    "generate_fixture_docs",
    "RecordAssembler",

    # Entity model schemas
    "DocTag",
    "ParameterModel",
    "ExecutableModel",
    "ConstantModel",
    "ClassModel",
    "EntityModel",

    # Output schemas
    "ParameterRecord",
    "ConstructorRecord",
    "MethodRecord",
    "ClassRecord",
    "GenerationSummary",

    # Core helpers
    "ConstantTable",
    "resolve_value_reference",
    "split_camel_case",
    "readable_name",
    "synthesize_method_usage",
    "synthesize_constructor_usage",
    "extract_usage",
    "resolve_method_usage",
    "resolve_constructor_usage",
    "context_help",
]

__version__ = "0.1.0"

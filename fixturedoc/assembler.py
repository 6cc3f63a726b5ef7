"""
Record assembly: turns entity models into output records.

For every class this collects its public constructors and its public
methods, including the ones inherited along the supertype chain, and
documents each with readable name, merged doc string, parameters, usage
template and context help.
"""

import logging
from typing import Iterable, Iterator, List, Optional

from fixturedoc.constants import ConstantTable, resolve_value_reference
from fixturedoc.doctags import merge_deprecation, param_description, return_description
from fixturedoc.naming import readable_name
from fixturedoc.schemas import (
    ClassModel,
    ClassRecord,
    ConstructorRecord,
    ExecutableModel,
    MethodRecord,
    ParameterRecord,
)
from fixturedoc.usage import context_help, resolve_constructor_usage, resolve_method_usage

logger = logging.getLogger(__name__)

# Host object and fixture plumbing methods, never keywords
DEFAULT_IGNORED_METHODS = frozenset({
    "toString",
    "aroundSlimInvoke",
    "getClass",
    "equals",
    "notify",
    "notifyAll",
    "wait",
    "hashCode",
})


class RecordAssembler:
    """
    Assemble output records against a fixed constant table.

    The assembler holds no state besides its configuration, so records may
    be assembled in any order.
    """

    def __init__(self, constants: ConstantTable, ignored_methods: Optional[Iterable[str]] = None):
        """
        Initialize the assembler.

        Args:
            constants: Fully built constant table for the run
            ignored_methods: Method names never documented
                           (default: DEFAULT_IGNORED_METHODS)
        """
        self.constants = constants
        self.ignored_methods = frozenset(
            DEFAULT_IGNORED_METHODS if ignored_methods is None else ignored_methods
        )

    def assemble_all(self, classes: Iterable[ClassModel]) -> Iterator[ClassRecord]:
        """Records for the classes and, after each, its nested classes."""
        for class_model in classes:
            yield self.assemble_class(class_model)
            yield from self.assemble_all(class_model.nested)

    def assemble_class(self, class_model: ClassModel) -> ClassRecord:
        """Record of one class, without its nested classes."""
        logger.debug(f"Assembling {class_model.qualified_name}")

        constructors = [
            self.assemble_constructor(class_model, constructor)
            for constructor in class_model.constructors
            if constructor.is_public
        ]

        return ClassRecord(
            type_name=class_model.qualified_name,
            name=class_model.name,
            qualified_name=class_model.qualified_name,
            readable_name=readable_name(class_model.name),
            doc_string=merge_deprecation(class_model.doc_comment, class_model.tags),
            annotations=list(class_model.annotations),
            constructors=constructors,
            public_methods=[self.assemble_method(m) for m in self.collect_public_methods(class_model)],
        )

    def collect_public_methods(self, class_model: ClassModel) -> List[ExecutableModel]:
        """
        Public methods of the class followed by those of each supertype.

        Overridden methods appear once per declaring type.
        """
        methods = []
        for owner in [class_model] + list(class_model.supertypes):
            for method in owner.methods:
                if method.is_public and method.name not in self.ignored_methods:
                    methods.append(method)
        return methods

    def assemble_method(self, method: ExecutableModel) -> MethodRecord:
        usage = resolve_method_usage(
            method.name,
            [p.name for p in method.parameters],
            method.doc_comment,
        )
        return MethodRecord(
            name=method.name,
            readable_name=readable_name(method.name),
            doc_string=merge_deprecation(method.doc_comment, method.tags),
            exceptions=list(method.thrown_types),
            annotations=list(method.annotations),
            parameters=self.assemble_parameters(method),
            return_type=method.return_type or "void",
            return_description=return_description(method.tags),
            usage=usage,
            context_help=context_help(usage),
        )

    def assemble_constructor(self, class_model: ClassModel, constructor: ExecutableModel) -> ConstructorRecord:
        # Constructors are named after their type
        usage = resolve_constructor_usage(
            class_model.name,
            [p.name for p in constructor.parameters],
            constructor.doc_comment,
        )
        return ConstructorRecord(
            name=class_model.name,
            readable_name=readable_name(class_model.name),
            doc_string=merge_deprecation(constructor.doc_comment, constructor.tags),
            exceptions=list(constructor.thrown_types),
            annotations=list(constructor.annotations),
            parameters=self.assemble_parameters(constructor),
            usage=usage,
            context_help=context_help(usage),
        )

    def assemble_parameters(self, executable: ExecutableModel) -> List[ParameterRecord]:
        records = []
        for parameter in executable.parameters:
            description = param_description(executable.tags, parameter.name)
            if description is not None:
                description = resolve_value_reference(description, self.constants)
            records.append(ParameterRecord(
                name=parameter.name,
                type=parameter.type_name,
                description=description,
            ))
        return records

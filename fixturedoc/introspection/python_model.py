"""
Python introspection adapter.

Builds the entity model of Python fixture classes with ``importlib`` and
``inspect``. Doc comments are the docstrings, written with the block tag
convention (``@param``, ``@return``, ``@throws``, ``@deprecated``).
Decorators play the role of annotations and are read from the class source.
"""

import ast
import importlib
import inspect
import logging
import textwrap
from typing import Any, Dict, Iterable, List, Optional

from fixturedoc.doctags import parse_doc_tags, thrown_types
from fixturedoc.naming import simple_type_name
from fixturedoc.schemas import (
    ClassModel,
    ConstantModel,
    ExecutableModel,
    ParameterModel,
)

logger = logging.getLogger(__name__)

CONSTANT_TYPES = (bool, int, float, str)


def is_public(name: str) -> bool:
    return not name.startswith("_")


def format_annotation(annotation: Any) -> str:
    """Simple type name of a parameter or return annotation."""
    if annotation is inspect.Parameter.empty:
        return "Any"
    if annotation is None or annotation is type(None):
        return "None"
    if isinstance(annotation, str):
        return simple_type_name(annotation)
    if isinstance(annotation, type) and not getattr(annotation, "__args__", None):
        return annotation.__qualname__
    return simple_type_name(str(annotation))


def clean_doc(obj: Any) -> str:
    """The object's own docstring, cleaned; empty when it has none."""
    doc = getattr(obj, "__doc__", None)
    return inspect.cleandoc(doc) if isinstance(doc, str) else ""


def decorator_name(node: ast.expr) -> str:
    """Simple name of a decorator expression."""
    if isinstance(node, ast.Call):
        return decorator_name(node.func)
    if isinstance(node, ast.Attribute):
        return node.attr
    if isinstance(node, ast.Name):
        return node.id
    return ast.unparse(node)


class PythonModelAdapter:
    """
    Build ClassModels from Python classes.

    Handles:
    - Public classes defined in the given modules, nested classes included
    - One constructor per class, from ``__init__``
    - Public functions, static methods and class methods as methods
    - UPPER_CASE literal class attributes as constants
    - The MRO (without ``object``) as the supertype chain
    """

    def load_modules(self, module_names: Iterable[str]) -> List[ClassModel]:
        """
        Import modules and model every public class they define.

        Modules that fail to import are logged and skipped.
        """
        classes = []
        for module_name in module_names:
            try:
                module = importlib.import_module(module_name)
            except Exception as e:
                logger.error(f"Failed to import {module_name}: {e}")
                continue

            members = [
                obj for name, obj in vars(module).items()
                if is_public(name) and inspect.isclass(obj) and obj.__module__ == module.__name__
                and obj.__qualname__ == name
            ]
            logger.info(f"Found {len(members)} classes in {module_name}")
            classes.extend(self.load_classes(members))

        return classes

    def load_classes(self, classes: Iterable[type]) -> List[ClassModel]:
        return [self.class_model(cls) for cls in classes]

    def class_model(self, cls: type, shallow: bool = False) -> ClassModel:
        """
        Model a class.

        Args:
            cls: Class to model
            shallow: Only name, methods and constants (supertype chain entries)

        Returns:
            ClassModel
        """
        decorators = self._decorators(cls)
        doc_comment = clean_doc(cls)

        model = ClassModel(
            qualified_name=f"{cls.__module__}.{cls.__qualname__}",
            name=cls.__name__,
            doc_comment=doc_comment,
            tags=parse_doc_tags(doc_comment),
            annotations=decorators.get(None, []),
            methods=self._methods(cls, decorators),
            constants=self._constants(cls),
        )
        if shallow:
            return model

        model.constructors = [self._constructor(cls, decorators)]
        model.nested = [
            self.class_model(obj) for name, obj in vars(cls).items()
            if is_public(name) and inspect.isclass(obj)
            and obj.__qualname__ == f"{cls.__qualname__}.{name}"
        ]
        model.supertypes = [
            self.class_model(base, shallow=True)
            for base in cls.__mro__[1:] if base is not object
        ]
        return model

    def _constructor(self, cls: type, decorators: Dict[Optional[str], List[str]]) -> ExecutableModel:
        init = cls.__dict__.get("__init__")
        if init is None:
            # Inherited or default constructor, documented with the class signature
            doc_comment = ""
            parameters = self._parameters(cls.__init__, skip_first=True) if cls.__init__ is not object.__init__ else []
        else:
            doc_comment = clean_doc(init)
            parameters = self._parameters(init, skip_first=True)

        tags = parse_doc_tags(doc_comment)
        return ExecutableModel(
            name=cls.__name__,
            parameters=parameters,
            doc_comment=doc_comment,
            tags=tags,
            annotations=decorators.get("__init__", []),
            thrown_types=thrown_types(tags),
        )

    def _methods(self, cls: type, decorators: Dict[Optional[str], List[str]]) -> List[ExecutableModel]:
        methods = []
        for name, member in vars(cls).items():
            if not is_public(name):
                continue

            if isinstance(member, staticmethod):
                function, skip_first = member.__func__, False
            elif isinstance(member, classmethod):
                function, skip_first = member.__func__, True
            elif inspect.isfunction(member):
                function, skip_first = member, True
            else:
                continue

            doc_comment = clean_doc(function)
            tags = parse_doc_tags(doc_comment)
            methods.append(ExecutableModel(
                name=name,
                parameters=self._parameters(function, skip_first),
                doc_comment=doc_comment,
                tags=tags,
                annotations=decorators.get(name, []),
                thrown_types=thrown_types(tags),
                return_type=self._return_type(function),
            ))
        return methods

    def _parameters(self, function: Any, skip_first: bool) -> List[ParameterModel]:
        try:
            signature = inspect.signature(function)
        except (TypeError, ValueError) as e:
            logger.debug(f"No signature for {function!r}: {e}")
            return []

        parameters = list(signature.parameters.values())
        if skip_first and parameters:
            parameters = parameters[1:]
        return [
            ParameterModel(name=p.name, type_name=format_annotation(p.annotation))
            for p in parameters
        ]

    def _return_type(self, function: Any) -> str:
        try:
            return format_annotation(inspect.signature(function).return_annotation)
        except (TypeError, ValueError):
            return "Any"

    def _constants(self, cls: type) -> List[ConstantModel]:
        constants = []
        for name, value in vars(cls).items():
            if not is_public(name) or not name.isupper():
                continue
            if callable(value) or isinstance(value, (staticmethod, classmethod, property)):
                continue
            is_literal = isinstance(value, CONSTANT_TYPES)
            constants.append(ConstantModel(
                name=name,
                value=value if is_literal else None,
                is_public=True,
                is_constant=is_literal,
            ))
        return constants

    def _decorators(self, cls: type) -> Dict[Optional[str], List[str]]:
        """
        Decorator names of the class (key None) and of its functions.

        Classes without readable source have no decorators.
        """
        try:
            source = textwrap.dedent(inspect.getsource(cls))
            tree = ast.parse(source)
        except (OSError, TypeError, SyntaxError) as e:
            logger.debug(f"No source for {cls.__qualname__}: {e}")
            return {}

        class_node = next((n for n in tree.body if isinstance(n, ast.ClassDef)), None)
        if class_node is None:
            return {}

        decorators: Dict[Optional[str], List[str]] = {
            None: [decorator_name(d) for d in class_node.decorator_list]
        }
        for node in class_node.body:
            if isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef)):
                decorators[node.name] = [
                    decorator_name(d) for d in node.decorator_list
                    if decorator_name(d) not in ("staticmethod", "classmethod")
                ]
        return decorators

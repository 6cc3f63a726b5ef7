"""
Pydantic schemas for fixturedoc.

Two groups of models live here:

- Entity model: what an adapter (Python introspection or a JSON export from
  another reflection tool) supplies about the classes being documented.
- Output records: what gets serialized, one JSON file per class. Field
  aliases match the keys the fixture help consumers read (``readableName``,
  ``docString``, ``contexthelp``, ...).

Architecture:
- DocTag: structured block tag parsed from a doc comment
- ParameterModel / ExecutableModel / ConstantModel / ClassModel: entity model
- EntityModel: complete entity set for a run
- ParameterRecord / ConstructorRecord / MethodRecord / ClassRecord: output
- GenerationSummary: result of a generation run
"""

from pydantic import BaseModel, Field
from typing import List, Optional, Union


# ============================================================================
# ENTITY MODEL SCHEMAS
# ============================================================================

class DocTag(BaseModel):
    """Block tag from a doc comment, e.g. ``@param name text``."""
    kind: str = Field(description="Canonical tag kind (param, return, deprecated, throws, ...)")
    name: Optional[str] = Field(None, description="Associated name (parameter name, thrown type)")
    text: str = Field("", description="Tag text")

    class Config:
        json_schema_extra = {
            "example": {
                "kind": "param",
                "name": "amount",
                "text": "Amount to set, at most {@value shop.Config#MAX}"
            }
        }


class ParameterModel(BaseModel):
    """Declared parameter of a constructor or method."""
    name: str = Field(description="Parameter name")
    type_name: str = Field("Any", description="Declared type, already formatted")


class ExecutableModel(BaseModel):
    """
    Constructor or method entity.

    Constructors and methods are documented identically except that
    constructors have no return type.
    """
    name: str = Field(description="Simple name")
    parameters: List[ParameterModel] = Field(default_factory=list, description="Parameters in declaration order")
    doc_comment: str = Field("", description="Raw doc comment text")
    tags: List[DocTag] = Field(default_factory=list, description="Block tags of the doc comment")
    annotations: List[str] = Field(default_factory=list, description="Annotation/decorator simple names")
    thrown_types: List[str] = Field(default_factory=list, description="Thrown error type names")
    return_type: Optional[str] = Field(None, description="Return type name (methods only)")
    is_public: bool = Field(True, description="Whether the entity is publicly visible")


class ConstantModel(BaseModel):
    """Field declared on a class; only public constants feed the constant table."""
    name: str = Field(description="Field name")
    value: Union[bool, int, float, str, None] = Field(None, description="Literal value")
    is_public: bool = Field(True, description="Whether the field is publicly visible")
    is_constant: bool = Field(True, description="Whether the value is a compile-time constant")


class ClassModel(BaseModel):
    """
    Class entity with its members.

    ``supertypes`` is the linear supertype chain, nearest first. Each entry
    is a shallow ClassModel; inherited methods are collected by walking this
    list, never by native inheritance.
    """
    qualified_name: str = Field(description="Globally unique qualified name")
    name: str = Field(description="Simple name")
    doc_comment: str = Field("", description="Raw doc comment text")
    tags: List[DocTag] = Field(default_factory=list, description="Block tags of the doc comment")
    annotations: List[str] = Field(default_factory=list, description="Annotation/decorator simple names")
    constructors: List[ExecutableModel] = Field(default_factory=list)
    methods: List[ExecutableModel] = Field(default_factory=list)
    constants: List[ConstantModel] = Field(default_factory=list)
    nested: List["ClassModel"] = Field(default_factory=list, description="Nested classes")
    supertypes: List["ClassModel"] = Field(default_factory=list, description="Supertype chain, nearest first")

    class Config:
        json_schema_extra = {
            "example": {
                "qualified_name": "shop.fixtures.CartFixture",
                "name": "CartFixture",
                "doc_comment": "Drives the shopping cart.",
                "constructors": [{"name": "CartFixture", "parameters": []}],
                "methods": [
                    {
                        "name": "addItem",
                        "parameters": [{"name": "sku", "type_name": "str"}],
                        "return_type": "bool"
                    }
                ],
                "constants": [{"name": "MAX_ITEMS", "value": 10}]
            }
        }


class EntityModel(BaseModel):
    """Complete set of class entities for one run."""
    classes: List[ClassModel] = Field(default_factory=list)


# ============================================================================
# OUTPUT RECORD SCHEMAS
# ============================================================================

class ParameterRecord(BaseModel):
    """Parameter as written to the output record."""
    name: str
    type: str
    description: Optional[str] = None


class ConstructorRecord(BaseModel):
    """Documentation record for a public constructor."""
    name: str
    readable_name: str = Field(alias="readableName")
    doc_string: str = Field("", alias="docString")
    exceptions: List[str] = Field(default_factory=list)
    annotations: List[str] = Field(default_factory=list)
    parameters: List[ParameterRecord] = Field(default_factory=list)
    usage: str
    context_help: str = Field(alias="contexthelp")

    class Config:
        populate_by_name = True


class MethodRecord(ConstructorRecord):
    """Documentation record for a public method."""
    return_type: str = Field(alias="returnType")
    return_description: Optional[str] = Field(None, alias="returnDescription")


class ClassRecord(BaseModel):
    """One output unit: a class with its constructors and public methods."""
    type_name: str = Field(alias="typeName")
    name: str
    qualified_name: str = Field(alias="qualifiedName")
    readable_name: str = Field(alias="readableName")
    doc_string: str = Field("", alias="docString")
    annotations: List[str] = Field(default_factory=list)
    constructors: List[ConstructorRecord] = Field(default_factory=list)
    public_methods: List[MethodRecord] = Field(default_factory=list, alias="publicMethods")

    class Config:
        populate_by_name = True

    def to_json(self) -> str:
        """Serialize with the consumer-facing key names."""
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=2)


class GenerationSummary(BaseModel):
    """Outcome of a generation run."""
    total_classes: int = Field(description="Number of class records assembled")
    written: List[str] = Field(default_factory=list, description="Paths of records written")
    failed: List[str] = Field(default_factory=list, description="Qualified names whose record could not be written")
    output_dir: str = Field(description="Directory the records were written to")
    timestamp: str = Field(description="ISO timestamp of the run")

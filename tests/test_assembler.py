"""Tests for record assembly."""

from fixturedoc.assembler import DEFAULT_IGNORED_METHODS, RecordAssembler
from fixturedoc.constants import ConstantTable
from fixturedoc.doctags import parse_doc_tags
from fixturedoc.schemas import ClassModel, ExecutableModel, ParameterModel


def _method(name, params=(), doc="", return_type="void", **kwargs):
    return ExecutableModel(
        name=name,
        parameters=[ParameterModel(name=p, type_name="String") for p in params],
        doc_comment=doc,
        tags=parse_doc_tags(doc),
        return_type=return_type,
        **kwargs,
    )


def _cart_class():
    base = ClassModel(
        qualified_name="shop.BaseFixture",
        name="BaseFixture",
        methods=[_method("reset"), _method("toString", return_type="String")],
    )
    return ClassModel(
        qualified_name="shop.CartFixture",
        name="CartFixture",
        doc_comment="Drives the cart.",
        tags=parse_doc_tags("@deprecated use OrderFixture"),
        annotations=["Fixture"],
        constructors=[
            ExecutableModel(
                name="CartFixture",
                parameters=[ParameterModel(name="owner", type_name="String")],
                doc_comment="Creates a cart.\n@param owner cart owner",
                tags=parse_doc_tags("@param owner cart owner"),
            ),
            ExecutableModel(name="CartFixture", is_public=False),
        ],
        methods=[
            _method(
                "setValue",
                ["amount"],
                doc="Sets it.\n@param amount at most {@value shop.Config#MAX}\n@return done\n@deprecated use set",
                return_type="boolean",
                thrown_types=["IllegalStateException"],
                annotations=["Keyword"],
            ),
            _method("hashCode", return_type="int"),
            _method("hidden", is_public=False),
        ],
        nested=[ClassModel(qualified_name="shop.CartFixture.Line", name="Line")],
        supertypes=[base],
    )


def _assembler():
    return RecordAssembler(ConstantTable({"shop.Config#MAX": 10}))


def test_class_record():
    record = _assembler().assemble_class(_cart_class())

    assert record.name == "CartFixture"
    assert record.qualified_name == "shop.CartFixture"
    assert record.type_name == "shop.CartFixture"
    assert record.readable_name == "cart fixture"
    assert record.doc_string == "Drives the cart.\r\n<b>Deprecated:</b> use OrderFixture"
    assert record.annotations == ["Fixture"]


def test_public_methods_include_supertypes():
    record = _assembler().assemble_class(_cart_class())
    assert [m.name for m in record.public_methods] == ["setValue", "reset"]


def test_method_record():
    record = _assembler().assemble_class(_cart_class())
    method = record.public_methods[0]

    assert method.readable_name == "set value"
    assert method.usage == "| set | [amount] | value |"
    assert method.context_help == "set <amount> value"
    assert method.return_type == "boolean"
    assert method.return_description == "done"
    assert method.exceptions == ["IllegalStateException"]
    assert method.annotations == ["Keyword"]
    assert method.doc_string.endswith("\r\n<b>Deprecated:</b> use set")
    assert method.parameters[0].name == "amount"
    assert method.parameters[0].type == "String"
    assert method.parameters[0].description == "at most 10"


def test_parameter_without_tag_has_no_description():
    record = _assembler().assemble_method(_method("addItem", ["sku"]))
    assert record.parameters[0].description is None
    assert "description" not in record.parameters[0].model_dump(exclude_none=True)


def test_constructor_record():
    record = _assembler().assemble_class(_cart_class())

    assert len(record.constructors) == 1
    constructor = record.constructors[0]
    assert constructor.name == "CartFixture"
    assert constructor.usage == "| cart fixture | [owner] |"
    assert constructor.context_help == "cart fixture <owner>"
    assert constructor.parameters[0].description == "cart owner"
    assert constructor.doc_string == "Creates a cart.\n@param owner cart owner"


def test_deprecated_constructor():
    doc = "Creates a cart.\n@deprecated use OrderFixture"
    cart = ClassModel(
        qualified_name="shop.CartFixture",
        name="CartFixture",
        constructors=[
            ExecutableModel(name="CartFixture", doc_comment=doc, tags=parse_doc_tags(doc)),
            ExecutableModel(
                name="CartFixture",
                parameters=[ParameterModel(name="owner"), ParameterModel(name="size")],
            ),
        ],
    )

    deprecated, sized = _assembler().assemble_class(cart).constructors

    assert deprecated.doc_string == doc + "\r\n<b>Deprecated:</b> use OrderFixture"
    assert sized.doc_string == ""
    assert sized.context_help == "cart fixture <owner> <size>"


def test_authored_usage():
    method = _method("setValue", ["amount"], doc="Usage: | put | [amount] | in |")
    record = _assembler().assemble_method(method)
    assert record.usage == "| put | [amount] | in |"
    assert record.context_help == "put <amount> in"


def test_assemble_all_includes_nested():
    records = list(_assembler().assemble_all([_cart_class()]))
    assert [r.qualified_name for r in records] == ["shop.CartFixture", "shop.CartFixture.Line"]


def test_custom_ignored_methods():
    assembler = RecordAssembler(ConstantTable(), ignored_methods={"reset"})
    record = assembler.assemble_class(_cart_class())
    assert [m.name for m in record.public_methods] == ["setValue", "hashCode", "toString"]
    assert "hashCode" in DEFAULT_IGNORED_METHODS


def test_serialized_keys():
    record = _assembler().assemble_class(_cart_class())
    data = record.model_dump(by_alias=True, exclude_none=True)

    assert set(data) == {
        "typeName", "name", "qualifiedName", "readableName", "docString",
        "annotations", "constructors", "publicMethods",
    }
    method = data["publicMethods"][0]
    assert {"readableName", "docString", "returnType", "returnDescription", "usage", "contexthelp",
            "exceptions", "annotations", "parameters"} <= set(method)
    assert "returnType" not in data["constructors"][0]
    assert "returnDescription" not in data["publicMethods"][1]

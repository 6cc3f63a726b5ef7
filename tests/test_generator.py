"""Tests for generation runs and record writing."""

import json
from pathlib import Path

from fixturedoc.doctags import parse_doc_tags
from fixturedoc.generator import FixtureDocGenerator, generate_fixture_docs
from fixturedoc.introspection import PythonModelAdapter
from fixturedoc.schemas import ClassModel, ClassRecord, ConstantModel, ExecutableModel, ParameterModel
from fixturedoc.writer import RecordWriter


def test_generate_from_python_module(sample_module, tmp_path):
    classes = PythonModelAdapter().load_modules([sample_module])
    summary = generate_fixture_docs(classes, tmp_path)

    assert summary.total_classes == 4
    assert summary.failed == []
    names = sorted(Path(p).name for p in summary.written)
    assert names == [
        "shop_fixtures.BaseFixture.json",
        "shop_fixtures.CartFixture.Line.json",
        "shop_fixtures.CartFixture.json",
        "shop_fixtures.Config.json",
    ]

    data = json.loads((tmp_path / "shop_fixtures.CartFixture.json").read_text(encoding="utf-8"))
    assert data["qualifiedName"] == "shop_fixtures.CartFixture"
    assert data["docString"].endswith("<b>Deprecated:</b> use OrderFixture instead")

    methods = {m["name"]: m for m in data["publicMethods"]}
    assert list(methods) == ["setValue", "add_item", "doIt", "reset"]

    set_value = methods["setValue"]
    assert set_value["usage"] == "| set | [amount] | value |"
    assert set_value["contexthelp"] == "set <amount> value"
    assert set_value["parameters"] == [
        {"name": "amount", "type": "int", "description": "how many, at most 10"}
    ]
    assert set_value["returnDescription"] == "true when accepted"
    assert set_value["exceptions"] == ["ValueError"]

    assert methods["add_item"]["usage"] == "| add | [amount] | of | [sku] |"
    assert methods["doIt"]["usage"] == "| do it |"

    constructor = data["constructors"][0]
    assert constructor["usage"] == "| cart fixture | [owner] |"
    assert constructor["parameters"][0]["description"] == "name of the cart owner"


def test_constants_resolve_regardless_of_order(tmp_path):
    user = ClassModel(
        qualified_name="a.User",
        name="User",
        methods=[ExecutableModel(
            name="setLimit",
            parameters=[ParameterModel(name="limit")],
            tags=parse_doc_tags("@param limit up to {@value z.Limits#MAX}"),
        )],
    )
    limits = ClassModel(
        qualified_name="z.Limits",
        name="Limits",
        constants=[ConstantModel(name="MAX", value=5)],
    )

    records = FixtureDocGenerator(tmp_path).assemble([user, limits])
    assert records[0].public_methods[0].parameters[0].description == "up to 5"


def test_existing_record_is_replaced(tmp_path):
    target = tmp_path / "a.Thing.json"
    target.write_text("stale", encoding="utf-8")

    FixtureDocGenerator(tmp_path).generate([ClassModel(qualified_name="a.Thing", name="Thing")])

    assert json.loads(target.read_text(encoding="utf-8"))["name"] == "Thing"


def test_write_failure_does_not_stop_other_records(tmp_path):
    # A directory in place of the record file makes that write fail
    (tmp_path / "a.Broken.json").mkdir()
    classes = [
        ClassModel(qualified_name="a.Broken", name="Broken"),
        ClassModel(qualified_name="a.Fine", name="Fine"),
    ]

    summary = FixtureDocGenerator(tmp_path).generate(classes)

    assert summary.failed == ["a.Broken"]
    assert [Path(p).name for p in summary.written] == ["a.Fine.json"]
    assert (tmp_path / "a.Fine.json").exists()


def test_writer_path(tmp_path):
    record = ClassRecord(
        type_name="a.b.C", name="C", qualified_name="a.b.C", readable_name="c",
    )
    path = RecordWriter(tmp_path / "docs").write(record)
    assert path == tmp_path / "docs" / "a.b.C.json"
    assert json.loads(path.read_text(encoding="utf-8"))["typeName"] == "a.b.C"

"""Tests for the constant table and {@value} resolution."""

import pytest

from fixturedoc.constants import ConstantTable, resolve_value_reference
from fixturedoc.schemas import ClassModel, ConstantModel


def _class(qualified_name, constants, nested=()):
    return ClassModel(
        qualified_name=qualified_name,
        name=qualified_name.rsplit(".", 1)[-1],
        constants=constants,
        nested=list(nested),
    )


def test_resolves_known_reference():
    table = ConstantTable({"Config#MAX": "10"})
    assert resolve_value_reference("Max is {@value Config#MAX}", table) == "Max is 10"


def test_unknown_reference_unchanged():
    table = ConstantTable()
    description = "Max is {@value Config#MAX}"
    assert resolve_value_reference(description, table) == description


def test_text_on_both_sides_kept():
    table = ConstantTable({"shop.Config#MAX": 10})
    assert resolve_value_reference("between 1 and {@value shop.Config#MAX} items", table) == "between 1 and 10 items"


def test_description_without_marker():
    assert resolve_value_reference("plain", ConstantTable({"A#B": 1})) == "plain"


def test_table_from_classes():
    classes = [
        _class("shop.Config", [
            ConstantModel(name="MAX", value=10),
            ConstantModel(name="CURRENCY", value="EUR"),
            ConstantModel(name="HIDDEN", value=1, is_public=False),
            ConstantModel(name="LIST", value=None, is_constant=False),
        ], nested=[
            _class("shop.Config.Limits", [ConstantModel(name="MIN", value=1)]),
        ]),
        _class("shop.Other", [ConstantModel(name="MAX", value=99)]),
    ]
    table = ConstantTable.from_classes(classes)

    assert dict(table) == {
        "shop.Config#MAX": 10,
        "shop.Config#CURRENCY": "EUR",
        "shop.Config.Limits#MIN": 1,
        "shop.Other#MAX": 99,
    }


def test_table_is_read_only():
    table = ConstantTable({"A#B": 1})
    with pytest.raises(TypeError):
        table["A#C"] = 2

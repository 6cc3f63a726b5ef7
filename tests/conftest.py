"""Shared pytest fixtures for fixturedoc tests."""

import sys
import textwrap

import pytest

SAMPLE_MODULE_NAME = "shop_fixtures"

SAMPLE_MODULE = textwrap.dedent('''
    from typing import Optional


    def keyword(func):
        return func


    class Config:
        """Shop limits."""

        MAX_ITEMS = 10
        CURRENCY = "EUR"
        DEFAULTS = ["apple"]
        _SECRET = "hidden"


    class BaseFixture:
        def reset(self) -> None:
            """Clears all state."""

        def toString(self) -> str:
            return "base"


    @keyword
    class CartFixture(BaseFixture):
        """
        Drives the shopping cart.

        @deprecated use OrderFixture instead
        """

        LIMIT = 3

        def __init__(self, owner: str):
            """
            Creates a cart.

            @param owner name of the cart owner
            """
            self.owner = owner

        @keyword
        def setValue(self, amount: int) -> bool:
            """
            Sets the amount.

            @param amount how many, at most {@value shop_fixtures.Config#MAX_ITEMS}
            @return true when accepted
            @throws ValueError when amount is negative
            """
            return True

        def add_item(self, sku, amount: Optional[int] = None):
            """Usage: | add | [amount] | of | [sku] |"""

        @staticmethod
        def doIt():
            pass

        def _private(self):
            pass

        class Line:
            """One cart line."""

            def total(self) -> float:
                return 0.0
''')


@pytest.fixture
def sample_module(tmp_path, monkeypatch):
    """Importable module with sample fixture classes; yields its name."""
    (tmp_path / f"{SAMPLE_MODULE_NAME}.py").write_text(SAMPLE_MODULE, encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    sys.modules.pop(SAMPLE_MODULE_NAME, None)
    yield SAMPLE_MODULE_NAME
    sys.modules.pop(SAMPLE_MODULE_NAME, None)

"""
Tests for remote handle helpers
"""

from types import SimpleNamespace

import pytest

from contract.fakes import FakeBoard, FakeFaucet, FakePurse, FakeWallet, FakeZoe
from contract.remotes import Board, Faucet, Home, Purse, Wallet, ZoeService, resolve


class TestResolve:
    async def test_plain_value(self):
        assert await resolve(3) == 3

    async def test_nested_awaitables(self):
        async def inner():
            return 'value'

        async def outer():
            return inner()

        assert await resolve(outer()) == 'value'


class TestHomeFromObject:
    def test_from_mapping(self):
        home = Home.from_object({'zoe': 1, 'board': 2, 'wallet': 3, 'faucet': 4, 'extra': 5})
        assert home == Home(zoe=1, board=2, wallet=3, faucet=4)

    def test_from_attributes(self):
        home = Home.from_object(SimpleNamespace(zoe=1, board=2, wallet=3, faucet=4))
        assert home.faucet == 4

    def test_home_passes_through(self):
        home = Home(zoe=1, board=2, wallet=3, faucet=4)
        assert Home.from_object(home) is home

    def test_missing_reference_raises(self):
        with pytest.raises(KeyError):
            Home.from_object({'zoe': 1})


def test_fakes_satisfy_handle_protocols():
    assert isinstance(FakeZoe(), ZoeService)
    assert isinstance(FakeBoard(), Board)
    assert isinstance(FakeWallet({}), Wallet)
    assert isinstance(FakeFaucet(), Faucet)
    assert isinstance(FakePurse(), Purse)
    assert not isinstance(object(), ZoeService)

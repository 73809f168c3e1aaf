"""
Shared fixtures built on the fakes in ``contract.fakes``.
"""

import os

import pytest

from contract.fakes import (
    CONTRACT_JS,
    FakeBoard,
    FakeFaucet,
    FakePurse,
    FakeWallet,
    FakeZoe,
)
from contract.petnames import PURSE_PETNAMES, RUN_PURSE_PETNAME


@pytest.fixture
def run_purse():
    return FakePurse(balance=1000)


@pytest.fixture
def wallet(run_purse):
    return FakeWallet({
        RUN_PURSE_PETNAME: run_purse,
        PURSE_PETNAMES['TOKEN']: FakePurse(),
    })


@pytest.fixture
def faucet():
    return FakeFaucet(FakePurse(balance=5))


@pytest.fixture
def zoe():
    return FakeZoe()


@pytest.fixture
def board():
    return FakeBoard()


@pytest.fixture
def home(zoe, board, wallet, faucet):
    return {'zoe': zoe, 'board': board, 'wallet': wallet, 'faucet': faucet}


@pytest.fixture
def contract_dir(tmp_path):
    """A dapp checkout with contract/src/contract.js and no ui/ folder yet"""
    base = tmp_path / 'contract'
    (base / 'src').mkdir(parents=True)
    (base / 'src' / 'contract.js').write_text(CONTRACT_JS)
    return base


@pytest.fixture
def path_resolve(contract_dir):
    def resolve_path(path: str) -> str:
        return os.path.normpath(os.path.join(str(contract_dir), path))
    return resolve_path

"""
In-memory fakes of the remote services the deploy script talks to.

Used by the tests and by ``DEPLOY_HOME_FACTORY=contract.fakes:make_fake_home``
for dry runs of the deploy runner.
"""

from typing import Any, Dict, List, Optional

from .petnames import PURSE_PETNAMES, RUN_PURSE_PETNAME

CONTRACT_JS = """\
// @ts-check
import { makeIssuerKit } from '@agoric/ertp';

export const start = zcf => {
  const { issuer, mint, brand } = makeIssuerKit('Token');
  return harden({ publicFacet: { getTokenIssuer: () => issuer } });
};
"""


class RemoteRejection(Exception):
    """Raised by a fake when it is told to reject a call"""


class FakePayment:
    def __init__(self, value: int):
        self.value = value


class FakePurse:
    def __init__(self, balance: int = 0):
        self.balance = balance
        self.withdrawals: List[int] = []

    async def get_current_amount(self) -> int:
        return self.balance

    async def withdraw(self, amount: int) -> FakePayment:
        if amount > self.balance:
            raise RemoteRejection(f"Withdrawal of {amount} exceeds balance {self.balance}")
        self.balance -= amount
        self.withdrawals.append(amount)
        return FakePayment(amount)

    async def deposit(self, payment: FakePayment) -> int:
        self.balance += payment.value
        return payment.value


class FakeWallet:
    def __init__(self, purses: Dict[str, FakePurse]):
        self.purses = purses

    async def get_purse(self, petname: str) -> FakePurse:
        return self.purses[petname]


class FakeFaucet:
    def __init__(self, fee_purse: Optional[FakePurse] = None):
        self.fee_purse = fee_purse if fee_purse is not None else FakePurse()

    def get_fee_purse(self) -> FakePurse:
        # Plain method: the deploy code must cope with non-coroutine handles
        return self.fee_purse


class FakeInstallation:
    def __init__(self, bundle: Any):
        self.bundle = bundle


class FakeZoe:
    """Installs bundles, handing back one installation per distinct bundle"""

    def __init__(self, reject: bool = False):
        self.reject = reject
        self.installed: List[Any] = []
        self._by_digest: Dict[str, FakeInstallation] = {}

    async def install(self, bundle: Any) -> FakeInstallation:
        if self.reject:
            raise RemoteRejection("install rejected")
        self.installed.append(bundle)
        digest = bundle.endo_zip_base64_sha512
        if digest not in self._by_digest:
            self._by_digest[digest] = FakeInstallation(bundle)
        return self._by_digest[digest]


class FakeBoard:
    """One-to-one mapping between values and string ids"""

    def __init__(self, first_id: int = 256, reject: bool = False):
        self.reject = reject
        self._next_id = first_id
        self._ids: Dict[Any, str] = {}
        self._values: Dict[str, Any] = {}

    async def get_id(self, value: Any) -> str:
        if self.reject:
            raise RemoteRejection("board rejected")
        if value not in self._ids:
            board_id = f"board0{self._next_id}"
            self._next_id += 1
            self._ids[value] = board_id
            self._values[board_id] = value
        return self._ids[value]

    async def get_value(self, board_id: str) -> Any:
        return self._values[board_id]

    def has(self, value: Any) -> bool:
        return value in self._ids

    def ids(self) -> List[str]:
        return list(self._values)


def make_fake_home(run_balance: int = 1000, fee_balance: int = 5) -> Dict[str, Any]:
    """Build a home whose wallet holds ``run_balance`` RUN."""
    return {
        'zoe': FakeZoe(),
        'board': FakeBoard(),
        'wallet': FakeWallet({
            RUN_PURSE_PETNAME: FakePurse(balance=run_balance),
            PURSE_PETNAMES['TOKEN']: FakePurse(),
        }),
        'faucet': FakeFaucet(FakePurse(balance=fee_balance)),
    }

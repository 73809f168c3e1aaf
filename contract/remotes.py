"""
Remote handle contracts for the objects the deploy harness hands us.

Handles are opaque: we only call the methods listed here and pass the
results along. A method may return a plain value or an awaitable, and a
handle may itself be an awaitable that resolves to the object.
"""

import inspect
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Protocol, runtime_checkable


async def resolve(value: Any) -> Any:
    """Await ``value`` if it is awaitable, otherwise return it as is."""
    while inspect.isawaitable(value):
        value = await value
    return value


@runtime_checkable
class Purse(Protocol):
    def get_current_amount(self) -> Any: ...

    def withdraw(self, amount: Any) -> Any: ...

    def deposit(self, payment: Any) -> Any: ...


@runtime_checkable
class ZoeService(Protocol):
    def install(self, bundle: Any) -> Any: ...


@runtime_checkable
class Board(Protocol):
    def get_id(self, value: Any) -> str: ...

    def get_value(self, board_id: str) -> Any: ...

    def has(self, value: Any) -> bool: ...

    def ids(self) -> Any: ...


@runtime_checkable
class Wallet(Protocol):
    def get_purse(self, petname: str) -> Purse: ...


@runtime_checkable
class Faucet(Protocol):
    def get_fee_purse(self) -> Purse: ...


@dataclass(frozen=True)
class Home:
    """The references the deploy harness starts us off with."""

    zoe: ZoeService
    board: Board
    wallet: Wallet
    faucet: Faucet

    @classmethod
    def from_object(cls, home: Any) -> 'Home':
        """Unpack a home given as a mapping or as an object with attributes."""
        if isinstance(home, Home):
            return home
        if isinstance(home, Mapping):
            return cls(
                zoe=home['zoe'],
                board=home['board'],
                wallet=home['wallet'],
                faucet=home['faucet'],
            )
        return cls(
            zoe=home.zoe,
            board=home.board,
            wallet=home.wallet,
            faucet=home.faucet,
        )


@dataclass(frozen=True)
class DeployPowers:
    """Special powers the deploy harness grants the script."""

    path_resolve: Callable[[str], str]

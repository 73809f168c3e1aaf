"""Funds the fee purse used to pay for interactions with Zoe."""

import logging

from .petnames import RUN_PURSE_PETNAME
from .remotes import Faucet, Wallet, resolve

logger = logging.getLogger(__name__)


async def send_deposit(wallet: Wallet, faucet: Faucet, petname: str = RUN_PURSE_PETNAME):
    """Move the whole current balance of the named purse into the fee purse."""
    wallet = await resolve(wallet)
    faucet = await resolve(faucet)

    run_purse = await resolve(wallet.get_purse(petname))
    run_amount = await resolve(run_purse.get_current_amount())
    fee_purse = await resolve(faucet.get_fee_purse())

    fee_payment = await resolve(run_purse.withdraw(run_amount))
    await resolve(fee_purse.deposit(fee_payment))
    logger.info(f"Deposited {run_amount} from '{petname}' into the fee purse")

"""Petnames of the purses and issuers the dapp works with."""

PURSE_PETNAMES = {
    'RUN': 'Agoric RUN currency',
    'TOKEN': 'Token',
}

RUN_PURSE_PETNAME = PURSE_PETNAMES['RUN']

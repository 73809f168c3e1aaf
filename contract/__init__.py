"""
Fungible Faucet Contract Deployment
===================================

Deploys the fungible faucet contract and publishes its installation:

- bundler: packages the contract source into an installable bundle
- funder: moves the RUN balance into the Zoe fee purse
- installer: installs the bundle on Zoe and registers it on the board
- constants_writer: writes the generated constants for the UI and API
"""

from .deploy import deploy_contract
from .installer import CONTRACT_NAME

__version__ = "1.0.0"

__all__ = ['deploy_contract', 'CONTRACT_NAME']

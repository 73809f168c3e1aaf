"""
Contract deploy script

Takes our contract code, installs it on Zoe, and makes the installation
publicly available. The API deploy step uses this installation later on.
"""

import logging
from typing import Any, Awaitable, Callable

from .bundler import bundle_source
from .constants_writer import InstallationConstants, write_constants
from .funder import send_deposit
from .installer import install_bundle
from .remotes import DeployPowers, Home, resolve

logger = logging.getLogger(__name__)

DEPLOY_SCRIPT = './deploy.py'
DEFAULTS_FOLDER = '../ui/public/conf'
DEFAULTS_FILE = '../ui/public/conf/installationConstants.js'


async def deploy_contract(
    home_promise: Any,
    powers: DeployPowers,
    bundler: Callable[[str], Awaitable[Any]] = bundle_source,
) -> InstallationConstants:
    """
    Fund the fee purse, install and register the contract, then save the
    constants where the UI and API can find them.

    Args:
        home_promise: The home object, or an awaitable resolving to it
        powers: Powers granted by the deploy harness
        bundler: Turns a source path into an installable bundle

    Returns:
        The constants that were written
    """
    home = Home.from_object(await resolve(home_promise))
    path_resolve = powers.path_resolve

    await send_deposit(home.wallet, home.faucet)
    constants = await install_bundle(path_resolve, home.zoe, home.board, bundler=bundler)

    dapp_constants: InstallationConstants = {
        'CONTRACT_NAME': constants['CONTRACT_NAME'],
        'INSTALLATION_BOARD_ID': constants['INSTALLATION_BOARD_ID'],
    }
    await write_constants(
        dapp_constants,
        path_resolve(DEFAULTS_FILE),
        generated_from=path_resolve(DEPLOY_SCRIPT),
        output_folder=path_resolve(DEFAULTS_FOLDER),
    )
    return dapp_constants

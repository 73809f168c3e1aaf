"""
Installer

Bundles the contract code, installs it on Zoe, and shares the installation
on the board so others can make instances of the contract.
"""

import logging
from typing import Any, Awaitable, Callable

from .bundler import bundle_source
from .constants_writer import InstallationConstants
from .remotes import Board, ZoeService, resolve

logger = logging.getLogger(__name__)

CONTRACT_NAME = 'fungibleFaucet'
CONTRACT_SOURCE = './src/contract.js'


async def install_bundle(
    path_resolve: Callable[[str], str],
    zoe: ZoeService,
    board: Board,
    bundler: Callable[[str], Awaitable[Any]] = bundle_source,
) -> InstallationConstants:
    """
    Install the contract bundle on Zoe and register it on the board.

    Args:
        path_resolve: Resolves paths relative to the deploy script
        zoe: Zoe service handle
        board: Board handle
        bundler: Turns a source path into an installable bundle

    Returns:
        The contract name and the board id of the installation
    """
    bundle = await bundler(path_resolve(CONTRACT_SOURCE))
    installation = await resolve((await resolve(zoe)).install(bundle))

    # The board maps values to ids one-to-one; re-adding returns the same id
    installation_board_id = await resolve((await resolve(board)).get_id(installation))

    logger.info("- SUCCESS! contract code installed on Zoe")
    logger.info(f"-- Contract Name: {CONTRACT_NAME}")
    logger.info(f"-- Installation Board Id: {installation_board_id}")
    return {
        'CONTRACT_NAME': CONTRACT_NAME,
        'INSTALLATION_BOARD_ID': installation_board_id,
    }

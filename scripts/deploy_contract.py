#!/usr/bin/env python3
"""
Fungible Faucet deploy runner
Resolves the home references and runs the contract deploy once
"""

import asyncio
import importlib
import logging
import os
from typing import Any, Callable

from dotenv import load_dotenv

from contract.deploy import deploy_contract
from contract.remotes import DeployPowers, resolve

logger = logging.getLogger(__name__)

CONTRACT_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'contract')


def configure_logging(log_file: str, level: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler()
        ]
    )


def make_path_resolve(base_dir: str) -> Callable[[str], str]:
    """Build a resolver for paths given relative to ``base_dir``."""
    base_dir = os.path.abspath(base_dir)

    def path_resolve(path: str) -> str:
        if os.path.isabs(path):
            return os.path.normpath(path)
        return os.path.normpath(os.path.join(base_dir, path))

    return path_resolve


def load_home_factory(spec: str) -> Callable[[], Any]:
    """
    Import the home factory named by a ``module:attribute`` spec.

    Raises:
        ValueError: If the spec is malformed or does not name a callable
    """
    module_name, sep, attr = spec.partition(':')
    if not sep or not module_name or not attr:
        raise ValueError(f"DEPLOY_HOME_FACTORY must look like 'module:attribute', got {spec!r}")

    module = importlib.import_module(module_name)
    factory = getattr(module, attr, None)
    if not callable(factory):
        raise ValueError(f"{spec} is not a callable home factory")
    return factory


async def run(factory: Callable[[], Any], base_dir: str):
    powers = DeployPowers(path_resolve=make_path_resolve(base_dir))
    # The factory may hand back the home directly or a coroutine for it
    home_promise = resolve(factory())
    return await deploy_contract(home_promise, powers)


def main():
    """Main function: read configuration, then deploy once"""
    load_dotenv()
    configure_logging(
        os.getenv("DEPLOY_LOG_FILE", "deploy.log"),
        os.getenv("LOG_LEVEL", "INFO"),
    )

    try:
        factory_spec = os.getenv("DEPLOY_HOME_FACTORY")
        if not factory_spec:
            raise ValueError("DEPLOY_HOME_FACTORY not found in environment")
        base_dir = os.getenv("DEPLOY_BASE_DIR", CONTRACT_DIR)

        factory = load_home_factory(factory_spec)
        logger.info(f"Deploying from {base_dir} using home from {factory_spec}")
        constants = asyncio.run(run(factory, base_dir))
        logger.info(f"Deploy finished: {constants}")

    except KeyboardInterrupt:
        logger.info("Deploy stopped by user")
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        raise


if __name__ == "__main__":
    main()

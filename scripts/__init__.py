"""
Deployment Scripts
==================

Operator-facing scripts for deploying the fungible faucet contract.

Structure:
- deploy_contract: runs the contract deploy against a configured home
"""

__version__ = "1.0.0"
__author__ = "Fungible Faucet Team"

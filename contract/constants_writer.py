"""
Generated constants module

Writes the installation constants where the UI and API can find them, as
an ES module with a single default export.
"""

import asyncio
import json
import logging
import os
import re
from typing import Any, Dict, Optional, TypedDict

logger = logging.getLogger(__name__)

GENERATED_HEADER = '// GENERATED FROM {source}\n'

_EXPORT_RE = re.compile(r'export default (.*);\s*$', re.DOTALL)


class InstallationConstants(TypedDict):
    CONTRACT_NAME: str
    INSTALLATION_BOARD_ID: str


def render_constants_module(constants: InstallationConstants, generated_from: str) -> str:
    """Render the constants as the text of the generated module."""
    return (
        GENERATED_HEADER.format(source=generated_from)
        + f"export default {json.dumps(constants, indent=2)};\n"
    )


def _write_file(folder: str, output_file: str, contents: str):
    os.makedirs(folder, exist_ok=True)
    with open(output_file, 'w', encoding='utf-8') as f:
        f.write(contents)


async def write_constants(
    constants: InstallationConstants,
    output_file: str,
    generated_from: str,
    output_folder: Optional[str] = None,
):
    """
    Write the generated constants module, replacing any previous one.

    ``output_folder`` (default: the parent of ``output_file``) is created
    first, with any missing parents.
    """
    logger.info(f"writing {output_file}")
    contents = render_constants_module(constants, generated_from)
    folder = output_folder or os.path.dirname(os.path.abspath(output_file))
    await asyncio.to_thread(_write_file, folder, output_file, contents)


def read_constants(output_file: str) -> Dict[str, Any]:
    """Parse a generated constants module back into its record."""
    with open(output_file, 'r', encoding='utf-8') as f:
        contents = f.read()

    match = _EXPORT_RE.search(contents)
    if match is None:
        raise ValueError(f"No default export found in {output_file}")
    return json.loads(match.group(1))

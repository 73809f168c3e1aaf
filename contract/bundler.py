"""
Contract bundler

Packs a contract entry module into an endoZipBase64 bundle that Zoe can
install.
"""

import base64
import hashlib
import io
import json
import logging
import os
import zipfile
from dataclasses import dataclass
from typing import Dict

logger = logging.getLogger(__name__)

BUNDLE_MODULE_FORMAT = 'endoZipBase64'
COMPARTMENT_MAP_NAME = 'compartment-map.json'
ENTRY_COMPARTMENT = 'contract'

# Fixed entry timestamp (the zip epoch) so equal sources give equal bundles
ZIP_DATE_TIME = (1980, 1, 1, 0, 0, 0)


@dataclass(frozen=True)
class Bundle:
    """Packaged, installable contract code"""
    module_format: str
    endo_zip_base64: str
    endo_zip_base64_sha512: str

    def to_dict(self) -> Dict[str, str]:
        return {
            'moduleFormat': self.module_format,
            'endoZipBase64': self.endo_zip_base64,
            'endoZipBase64Sha512': self.endo_zip_base64_sha512,
        }


def _compartment_map(module_name: str) -> bytes:
    compartment_map = {
        'tags': [],
        'entry': {
            'compartment': ENTRY_COMPARTMENT,
            'module': f'./{module_name}',
        },
        'compartments': {
            ENTRY_COMPARTMENT: {
                'name': ENTRY_COMPARTMENT,
                'label': ENTRY_COMPARTMENT,
                'location': ENTRY_COMPARTMENT,
                'modules': {
                    f'./{module_name}': {'location': module_name},
                },
            },
        },
    }
    return json.dumps(compartment_map, indent=2, sort_keys=True).encode('utf-8')


def _zip_entry(archive: zipfile.ZipFile, name: str, data: bytes):
    info = zipfile.ZipInfo(name, date_time=ZIP_DATE_TIME)
    info.compress_type = zipfile.ZIP_DEFLATED
    archive.writestr(info, data)


def pack_source(module_name: str, source: bytes) -> Bundle:
    """Zip a single entry module with its compartment map and encode it."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, 'w') as archive:
        _zip_entry(archive, COMPARTMENT_MAP_NAME, _compartment_map(module_name))
        _zip_entry(archive, f'{ENTRY_COMPARTMENT}/{module_name}', source)

    archive_bytes = buffer.getvalue()
    return Bundle(
        module_format=BUNDLE_MODULE_FORMAT,
        endo_zip_base64=base64.b64encode(archive_bytes).decode('ascii'),
        endo_zip_base64_sha512=hashlib.sha512(archive_bytes).hexdigest(),
    )


async def bundle_source(path: str) -> Bundle:
    """
    Bundle the contract entry module found at ``path``.

    Args:
        path: Absolute path to the contract source

    Returns:
        The bundle, ready to hand to ``zoe.install``
    """
    with open(path, 'rb') as f:
        source = f.read()

    bundle = pack_source(os.path.basename(path), source)
    logger.info(f"Bundled {path} (sha512 {bundle.endo_zip_base64_sha512[:16]}...)")
    return bundle


def unpack_bundle(bundle: Bundle) -> Dict[str, bytes]:
    """Return the archive entries of a bundle, keyed by name."""
    archive_bytes = base64.b64decode(bundle.endo_zip_base64)
    with zipfile.ZipFile(io.BytesIO(archive_bytes)) as archive:
        return {name: archive.read(name) for name in archive.namelist()}

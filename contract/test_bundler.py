"""
Tests for the contract bundler
"""

import base64
import hashlib
import json

import pytest

from contract.bundler import (
    BUNDLE_MODULE_FORMAT,
    COMPARTMENT_MAP_NAME,
    Bundle,
    bundle_source,
    pack_source,
    unpack_bundle,
)


class TestBundleSource:
    """Bundling a contract entry module from disk"""

    async def test_bundle_contains_source_and_manifest(self, contract_dir):
        source_path = contract_dir / 'src' / 'contract.js'
        bundle = await bundle_source(str(source_path))

        assert bundle.module_format == BUNDLE_MODULE_FORMAT
        entries = unpack_bundle(bundle)
        assert entries['contract/contract.js'] == source_path.read_bytes()

        manifest = json.loads(entries[COMPARTMENT_MAP_NAME])
        assert manifest['entry'] == {'compartment': 'contract', 'module': './contract.js'}

    async def test_digest_matches_archive(self, contract_dir):
        bundle = await bundle_source(str(contract_dir / 'src' / 'contract.js'))
        archive_bytes = base64.b64decode(bundle.endo_zip_base64)
        assert bundle.endo_zip_base64_sha512 == hashlib.sha512(archive_bytes).hexdigest()

    async def test_same_source_gives_same_bundle(self, contract_dir):
        path = str(contract_dir / 'src' / 'contract.js')
        assert await bundle_source(path) == await bundle_source(path)

    async def test_missing_source_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            await bundle_source(str(tmp_path / 'src' / 'missing.js'))


def test_different_sources_give_different_digests():
    first = pack_source('contract.js', b'export const start = () => 1;\n')
    second = pack_source('contract.js', b'export const start = () => 2;\n')
    assert first.endo_zip_base64_sha512 != second.endo_zip_base64_sha512


def test_to_dict_uses_wire_keys():
    bundle = Bundle('endoZipBase64', 'UEsDBA==', 'abc123')
    assert bundle.to_dict() == {
        'moduleFormat': 'endoZipBase64',
        'endoZipBase64': 'UEsDBA==',
        'endoZipBase64Sha512': 'abc123',
    }

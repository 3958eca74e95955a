"""
Content digests for decomposed units.

Digests are only ever compared for equality. A code line is keyed by its raw
text alone, so the same line hashes the same wherever it moves; every other
unit is keyed by a canonical serialization of its full data.
"""
import hashlib
import json
from typing import Any, Optional, Union

from document.units import CodeLineUnit
from .viewer_config import get_config

DIGEST_SIZE = 16  # bytes, 128-bit


def canonical_json(data: Any) -> str:
    """Deterministic JSON encoding that keeps mapping key order."""
    return json.dumps(data, ensure_ascii=False, separators=(',', ':'), default=str)


def digest_with_named_key(data: Union[str, bytes], key_name: str) -> str:
    """Keyed digest of `data`, domain-separated by `key_name`.

    BLAKE2b limits keys to 64 bytes, so the key is itself a digest of the name.
    """
    if isinstance(data, str):
        data = data.encode('utf-8')
    key = hashlib.blake2b(key_name.encode('utf-8'), digest_size=32).digest()
    return hashlib.blake2b(data, key=key, digest_size=DIGEST_SIZE).hexdigest()


def fingerprint(unit, context: Optional[str] = None) -> str:
    """Content digest of one unit."""
    context = context or get_config().digest_context
    if isinstance(unit, CodeLineUnit):
        hash_input = unit.raw
    else:
        hash_input = canonical_json(unit.to_dict())
    return digest_with_named_key(hash_input, context)

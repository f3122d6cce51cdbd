"""
Password hashing used for store credentials.

Digests are plain unsalted SHA-256 rendered as lowercase hex, which is what
existing store records hold. Without a per-store salt, identical passwords
produce identical digests and the values are open to precomputed-table
attacks. Moving to a salted, memory-hard scheme invalidates every stored
digest and needs a migration plan before it can happen.
"""

import hashlib


def hash_password(plaintext: str) -> str:
    return hashlib.sha256(plaintext.encode("utf-8")).hexdigest()

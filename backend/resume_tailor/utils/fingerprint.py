"""
Cache fingerprinting — MD5 over bounded-length prefixes of the inputs.
"""

from __future__ import annotations

import hashlib


def md5_hash(data: bytes) -> str:
    """Return hex MD5 digest of raw bytes."""
    return hashlib.md5(data).hexdigest()


def truncate(text: str, limit: int) -> str:
    """Return at most the first `limit` characters of text."""
    return text[:limit] if limit > 0 else text


def fingerprint(*parts: str) -> str:
    """Deterministic key for an ordered sequence of string parts."""
    # Length-prefix each part so ("ab", "c") and ("a", "bc") differ
    joined = "".join(f"{len(p)}:{p}|" for p in parts)
    return md5_hash(joined.encode("utf-8"))

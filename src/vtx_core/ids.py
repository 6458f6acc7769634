"""Deterministic identity functions for programs."""
from __future__ import annotations

import base64
import hashlib
import unicodedata


def canonicalize(text: str) -> str:
    """Canonicalize text: NFKC, casefold, whitespace normalize."""
    if not text:
        return ""
    t = unicodedata.normalize("NFKC", text).casefold()
    return " ".join(t.split())


def _hash(b: bytes, prefix: str) -> str:
    """Compute truncated SHA-256 hash with base32 encoding."""
    h = hashlib.sha256(b).digest()[:15]
    return prefix + base64.b32encode(h).decode("ascii").lower().rstrip("=")


def program_id(record: bytes) -> str:
    """Generate deterministic program ID from its encoded record."""
    return _hash(record, "p_")


def name_key(name: str) -> str:
    """Generate deterministic lookup key for a program name."""
    return _hash(canonicalize(name).encode("utf-8"), "n_")

"""
Mock implementations for testing gover components.

This package provides stand-ins for GnuPG so signature handling can be tested
without a gpg binary or real release keys.
"""

from .gnupg import FakeGPG, FakeKeyring, fake_sign, TRUSTED_FINGERPRINT

__all__ = [
    "FakeGPG",
    "FakeKeyring",
    "fake_sign",
    "TRUSTED_FINGERPRINT",
]

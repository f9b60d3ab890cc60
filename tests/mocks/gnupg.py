"""
Mock GnuPG for testing.

FakeGPG mimics the parts of gnupg.GPG that gover uses. A "signature" is
valid when its bytes equal fake_sign(data) for the signed data, so tests can
produce good and bad signatures without key material.
"""

import hashlib
from types import SimpleNamespace
from typing import Optional

TRUSTED_FINGERPRINT = "EB4C1BFD4F042F6DDDCCEC917721F63BD38B4796"
UNTRUSTED_FINGERPRINT = "0123456789ABCDEF0123456789ABCDEF01234567"

# key_status values python-gnupg reports for EXPKEYSIG and REVKEYSIG
KEY_STATUS = {
    "expired": "signing key has expired",
    "revoked": "signing key was revoked",
}


def fake_sign(
    data: bytes, fingerprint: str = TRUSTED_FINGERPRINT, key_state: str = "good"
) -> bytes:
    """
    Produce a fake detached signature over data by fingerprint.

    Args:
        key_state: 'good', or 'expired'/'revoked' for a signing key in that
            state at verification time
    """
    digest = hashlib.sha256(data).hexdigest()
    return f"FAKESIG {fingerprint} {digest} {key_state}\n".encode()


class FakeGPG:
    """Stand-in for gnupg.GPG."""

    def __init__(self, gnupghome: Optional[str] = None, options=None):
        self.gnupghome = gnupghome
        self.options = options
        self.verified_files = []

    def import_keys(self, key_data: str):
        if "BEGIN PGP PUBLIC KEY BLOCK" not in key_data:
            return SimpleNamespace(fingerprints=[], results=[])
        return SimpleNamespace(
            fingerprints=[TRUSTED_FINGERPRINT.lower()],
            results=[{"fingerprint": TRUSTED_FINGERPRINT, "ok": "1"}],
        )

    def verify_file(self, fileobj, data_filename=None, close_file=True):
        signature = fileobj.read()
        with open(data_filename, "rb") as f:
            data = f.read()
        self.verified_files.append(data_filename)

        if close_file:
            fileobj.close()

        parts = signature.decode(errors="replace").split()
        if len(parts) != 4 or parts[0] != "FAKESIG":
            return _verified(valid=False, status="no signature found")

        fingerprint, key_state = parts[1], parts[3]
        if signature != fake_sign(data, fingerprint, key_state):
            return _verified(valid=False, status="signature bad", fingerprint=fingerprint)
        if key_state in KEY_STATUS:
            # GnuPG reports the key problem first, then VALIDSIG
            return _verified(
                valid=False,
                status="signature valid",
                fingerprint=fingerprint,
                key_status=KEY_STATUS[key_state],
            )
        return _verified(valid=True, status="signature valid", fingerprint=fingerprint)


def _verified(
    valid: bool,
    status: str,
    fingerprint: Optional[str] = None,
    key_status: Optional[str] = None,
):
    good = status == "signature valid"
    return SimpleNamespace(
        valid=valid,
        status=status,
        key_status=key_status,
        stderr="",
        fingerprint=fingerprint,
        pubkey_fingerprint=fingerprint,
        username="Google Inc. (Linux Packages Signing Authority)" if good else None,
        signature_id="sig-1" if good else None,
    )


class FakeKeyring:
    """Duck-typed TrustedKeyring backed by FakeGPG."""

    def __init__(self, fingerprints=(TRUSTED_FINGERPRINT,)):
        self.gpg = FakeGPG()
        self.fingerprints = tuple(fingerprints)

    def is_trusted(self, fingerprint: Optional[str]) -> bool:
        return bool(fingerprint) and fingerprint.upper() in self.fingerprints

    def close(self) -> None:
        pass

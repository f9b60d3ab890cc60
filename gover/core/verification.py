"""
Detached OpenPGP signature verification against a pinned public key.

The trusted key is imported once per process into an isolated GnuPG home
that contains nothing else, so a signature can only validate against it.
There is no partial-trust mode: anything other than a good signature from a
trusted key raises SignatureVerificationError. Expiry of the signing key is
not checked; the pinned key's release subkeys have all expired.

Usage:
    from gover.core.verification import load_trusted_keyring, verify_detached_signature

    keyring = load_trusted_keyring()
    verify_detached_signature(keyring, archive_file, signature_file)
"""

import atexit
import functools
import logging
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Callable, Optional

import gnupg

from gover.core.exceptions import SignatureVerificationError
from gover.core.keys import GO_RELEASE_KEY, GO_RELEASE_KEY_FINGERPRINT

logger = logging.getLogger(__name__)

# python-gnupg key_status for an EXPKEYSIG result
EXPIRED_KEY_STATUS = "signing key has expired"


@dataclass(frozen=True)
class VerificationResult:
    """Outcome of a successful signature check."""

    fingerprint: str
    """Primary fingerprint of the key that made the signature"""

    username: Optional[str]
    """User ID of the signing key, if GnuPG reported one"""

    signature_id: Optional[str]
    """GnuPG signature id"""

    def __str__(self) -> str:
        return "Signature OK."


class TrustedKeyring:
    """
    Keyring holding only the trusted public key material.

    Args:
        armored_key: ASCII-armored public key block(s)
        gnupghome: Optional GnuPG home to use. If None, an ephemeral directory
            is created and removed by close().

    Raises:
        SignatureVerificationError: If GnuPG is unavailable or the key
            material cannot be imported
    """

    def __init__(self, armored_key: str, gnupghome: Optional[Path] = None):
        self._owns_home = gnupghome is None
        self.home = Path(gnupghome or tempfile.mkdtemp(prefix="gover-keyring-"))

        try:
            self.gpg = gnupg.GPG(
                gnupghome=str(self.home), options=["--trust-model", "always"]
            )
        except (OSError, ValueError) as e:
            self.close()
            raise SignatureVerificationError(f"GnuPG is not available: {e}") from e

        imported = self.gpg.import_keys(armored_key)
        fingerprints = tuple(fp.upper() for fp in imported.fingerprints if fp)
        if not fingerprints:
            self.close()
            raise SignatureVerificationError(
                f"failed to load trusted key: {imported.results or 'no keys found'}"
            )

        self.fingerprints = fingerprints
        logger.debug(f"Loaded trusted keys: {', '.join(fingerprints)}")

    def is_trusted(self, fingerprint: Optional[str]) -> bool:
        return bool(fingerprint) and fingerprint.upper() in self.fingerprints

    def close(self) -> None:
        """Remove the ephemeral GnuPG home, if this keyring created it."""
        if self._owns_home and self.home.exists():
            shutil.rmtree(self.home, ignore_errors=True)


@functools.lru_cache(maxsize=1)
def load_trusted_keyring() -> TrustedKeyring:
    """
    Load the embedded release key into a keyring.

    This function is cached - the key is imported once per process.

    Raises:
        SignatureVerificationError: If the key can't be imported or its
            fingerprint is not the pinned one
    """
    keyring = TrustedKeyring(GO_RELEASE_KEY)
    if not keyring.is_trusted(GO_RELEASE_KEY_FINGERPRINT):
        keyring.close()
        raise SignatureVerificationError(
            f"embedded key does not have fingerprint {GO_RELEASE_KEY_FINGERPRINT}"
        )
    atexit.register(keyring.close)
    return keyring


def verify_detached_signature(
    keyring: TrustedKeyring,
    archive: BinaryIO,
    signature: BinaryIO,
    on_verified: Optional[Callable[[VerificationResult], None]] = None,
) -> VerificationResult:
    """
    Verify a detached signature over an archive.

    Both file objects are rewound to offset 0 afterwards, so later stages can
    read them from the beginning.

    Args:
        keyring: Trusted keyring
        archive: Open archive file (must be backed by a named file)
        signature: Open armored or binary detached signature
        on_verified: Optional callback invoked once on success

    Returns:
        VerificationResult describing the good signature

    Raises:
        SignatureVerificationError: If the signature is malformed, does not
            match the archive, or was not made by a trusted key

    Example:
        >>> with open("go.src.tar.gz", "rb") as a, open("go.src.tar.gz.asc", "rb") as s:
        ...     verify_detached_signature(load_trusted_keyring(), a, s, print)
        Signature OK.
    """
    archive_path = getattr(archive, "name", None)
    if not isinstance(archive_path, str):
        raise SignatureVerificationError("archive must be a named file")

    try:
        archive.flush()
        signature.seek(0)
        verified = keyring.gpg.verify_file(
            signature, data_filename=archive_path, close_file=False
        )
    except (OSError, ValueError) as e:
        raise SignatureVerificationError(f"signature check failed: {e}") from e
    finally:
        _rewind(archive, signature)

    if not (verified.valid or _good_signature_from_expired_key(verified)):
        reason = (
            getattr(verified, "key_status", None)
            or verified.status
            or (verified.stderr or "").strip()
            or "no valid signature"
        )
        raise SignatureVerificationError(f"openpgp: {reason}")

    fingerprint = getattr(verified, "pubkey_fingerprint", None) or verified.fingerprint
    if not keyring.is_trusted(fingerprint):
        raise SignatureVerificationError(
            f"openpgp: signature made by untrusted key {fingerprint}"
        )

    result = VerificationResult(
        fingerprint=fingerprint.upper(),
        username=verified.username,
        signature_id=verified.signature_id,
    )
    if on_verified:
        on_verified(result)
    return result


def _rewind(*files: BinaryIO) -> None:
    for f in files:
        if not f.closed:
            f.seek(0)


def _good_signature_from_expired_key(verified) -> bool:
    """
    Whether GnuPG found the signature cryptographically good and only
    objected to the signing key having expired.
    """
    return (
        verified.status == "signature valid"
        and getattr(verified, "key_status", None) == EXPIRED_KEY_STATUS
    )

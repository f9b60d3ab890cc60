"""
Integration tests for signature verification with a real GnuPG.

Run with: pytest --integration
"""

import shutil
import pytest

from gover.core.exceptions import SignatureVerificationError
from gover.core.verification import TrustedKeyring, verify_detached_signature

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(shutil.which("gpg") is None, reason="gpg not installed"),
]


@pytest.fixture
def signer(tmp_path):
    """A throwaway signing key in its own GnuPG home."""
    import gnupg

    gpg = gnupg.GPG(gnupghome=str(tmp_path / "signer"))
    key_input = gpg.gen_key_input(
        key_type="RSA",
        key_length=2048,
        name_real="gover test",
        name_email="test@gover.invalid",
        no_protection=True,
    )
    key = gpg.gen_key(key_input)
    assert key.fingerprint
    return gpg, key.fingerprint


def _sign(gpg, fingerprint, data_path):
    sig_path = data_path.with_name(data_path.name + ".asc")
    with open(data_path, "rb") as f:
        signed = gpg.sign_file(
            f, keyid=fingerprint, detach=True, output=str(sig_path)
        )
    assert signed.status == "signature created"
    return sig_path


def test_real_signature_roundtrip(signer, tmp_path):
    """A detached signature by the trusted key validates."""
    gpg, fingerprint = signer
    data_path = tmp_path / "release.tar.gz"
    data_path.write_bytes(b"release contents")
    sig_path = _sign(gpg, fingerprint, data_path)

    keyring = TrustedKeyring(gpg.export_keys(fingerprint))
    try:
        with open(data_path, "rb") as archive, open(sig_path, "rb") as signature:
            result = verify_detached_signature(keyring, archive, signature)
        assert result.fingerprint == fingerprint.upper()
    finally:
        keyring.close()


def test_real_signature_tampered(signer, tmp_path):
    """Changing one byte after signing fails verification."""
    gpg, fingerprint = signer
    data_path = tmp_path / "release.tar.gz"
    data_path.write_bytes(b"release contents")
    sig_path = _sign(gpg, fingerprint, data_path)
    data_path.write_bytes(b"release contentz")

    keyring = TrustedKeyring(gpg.export_keys(fingerprint))
    try:
        with open(data_path, "rb") as archive, open(sig_path, "rb") as signature:
            with pytest.raises(SignatureVerificationError):
                verify_detached_signature(keyring, archive, signature)
    finally:
        keyring.close()


def test_expired_signing_subkey(tmp_path):
    """
    A release signed by a subkey that has since expired still validates.

    The key is created and used in 2015 via --faked-system-time, with a
    one-year expiry on the signing subkey, then verified at the real time.
    """
    import gnupg

    home = str(tmp_path / "signer")
    past = ["--faked-system-time", "20150601T000000"]
    gpg = gnupg.GPG(gnupghome=home, options=past)
    if not hasattr(gpg, "add_subkey"):
        pytest.skip("python-gnupg without add_subkey")

    primary = gpg.gen_key(
        gpg.gen_key_input(
            key_type="RSA",
            key_length=2048,
            key_usage="cert",
            name_real="gover expiry test",
            name_email="expiry@gover.invalid",
            expire_date=0,
            no_protection=True,
        )
    )
    assert primary.fingerprint
    subkey = gpg.add_subkey(
        primary.fingerprint, algorithm="rsa2048", usage="sign", expire="1y"
    )
    assert subkey.fingerprint

    data_path = tmp_path / "go1.4.src.tar.gz"
    data_path.write_bytes(b"release signed in 2015")
    sig_path = _sign(gpg, primary.fingerprint, data_path)

    keyring = TrustedKeyring(gpg.export_keys(primary.fingerprint))
    try:
        with open(data_path, "rb") as archive, open(sig_path, "rb") as signature:
            result = verify_detached_signature(keyring, archive, signature)
        assert result.fingerprint == primary.fingerprint.upper()
    finally:
        keyring.close()

"""
Tests for environment settings
==============================
"""

import pytest

ENV_VARS = (
    "SIGNED_REQUEST_SECRET",
    "SIGNED_REQUEST_TTL",
    "SIGNED_REQUEST_ALGORITHM",
    "SIGNED_REQUEST_ENCODING",
    "SIGNED_REQUEST_CANONICAL_FORM",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestSignerSettings:
    """Tests for SignerSettings."""

    def test_defaults(self):
        """Should fall back to sha256, 3600s and hex."""
        from signed_request import SignerSettings

        settings = SignerSettings()

        assert settings.secret == ""
        assert settings.ttl_seconds() == 3600
        assert settings.algorithm == "sha256"
        assert settings.encoding == "hex"
        assert settings.canonical_form == "concatenated"

    def test_reads_environment(self, monkeypatch):
        """Should read values from the environment at construction."""
        from signed_request import SignerSettings, SignatureEncoding

        monkeypatch.setenv("SIGNED_REQUEST_SECRET", "env-secret")
        monkeypatch.setenv("SIGNED_REQUEST_TTL", "45")
        monkeypatch.setenv("SIGNED_REQUEST_ALGORITHM", "sha512")
        monkeypatch.setenv("SIGNED_REQUEST_ENCODING", "base64_urlencoded")

        ctx = SignerSettings().to_context()

        assert ctx.secret == b"env-secret"
        assert ctx.ttl == 45
        assert ctx.algorithm == "sha512"
        assert ctx.encoding is SignatureEncoding.BASE64_URLENCODED

    def test_missing_secret_fails(self):
        """Should refuse to build a context without a secret."""
        from signed_request import SignerSettings, ConfigError, ConfigErrorReason

        with pytest.raises(ConfigError) as exc_info:
            SignerSettings().to_context()

        assert exc_info.value.reason is ConfigErrorReason.EMPTY_SECRET

    @pytest.mark.parametrize("ttl", ["abc", "1.5", "0", "-5"])
    def test_bad_ttl_fails(self, ttl):
        """Should report a bad TTL as a configuration error."""
        from signed_request import SignerSettings, ConfigError, ConfigErrorReason

        with pytest.raises(ConfigError) as exc_info:
            SignerSettings(secret="s", ttl=ttl).to_context()

        assert exc_info.value.reason is ConfigErrorReason.INVALID_TTL

    def test_unknown_algorithm_fails(self, monkeypatch):
        """Should report an unknown algorithm from the environment."""
        from signed_request import SignerSettings, ConfigError, ConfigErrorReason

        monkeypatch.setenv("SIGNED_REQUEST_ALGORITHM", "whirlpool-9000")

        with pytest.raises(ConfigError) as exc_info:
            SignerSettings(secret="s").to_context()

        assert exc_info.value.reason is ConfigErrorReason.UNSUPPORTED_ALGORITHM

    def test_explicit_values_override_environment(self, monkeypatch):
        """Should prefer values passed explicitly."""
        from signed_request import SignerSettings

        monkeypatch.setenv("SIGNED_REQUEST_TTL", "45")

        assert SignerSettings(secret="s", ttl=10).to_context().ttl == 10

    def test_clock_passed_through(self):
        """Should hand the clock to the context."""
        from signed_request import SignerSettings

        ctx = SignerSettings(secret="s").to_context(clock=lambda: 99)

        assert ctx.now() == 99

    def test_build_signer(self):
        """Should build a working RequestSigner."""
        from signed_request import SignerSettings

        signer = SignerSettings(secret="s").build_signer()

        assert signer.is_valid(signer.sign_request({"foo": "bar"})) is True

    def test_repr_hides_secret(self):
        """Should not show the secret in repr."""
        from signed_request import SignerSettings

        assert "hidden-value" not in repr(SignerSettings(secret="hidden-value"))

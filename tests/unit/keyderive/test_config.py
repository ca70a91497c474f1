"""Unit tests for configuration module."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from keyderive.config import Settings, settings
from keyderive.crypto import pbkdf2
from keyderive.crypto.digests import DigestAlgorithm
from tests.utils.pbkdf2_test_utils import reference_pbkdf2


class TestSettings:
    """Tests for Settings defaults."""

    def test_default_digest(self):
        """Default digest is SHA512."""
        assert settings.DEFAULT_DIGEST is DigestAlgorithm.SHA512

    def test_default_iterations(self):
        """Default iteration count is 10000."""
        assert settings.DEFAULT_ITERATIONS == 10000

    def test_default_text_encoding(self):
        """str passwords are UTF-8 encoded by default."""
        assert settings.TEXT_ENCODING == "utf-8"


@pytest.mark.usefixtures("clean_env")
class TestEnvironmentOverrides:
    """Settings pick up KEYDERIVE_* environment variables."""

    def test_digest_from_env(self):
        """KEYDERIVE_DEFAULT_DIGEST is normalized and applied."""
        with patch.dict(os.environ, {"KEYDERIVE_DEFAULT_DIGEST": "SHA256"}):
            fresh = Settings()
        assert fresh.DEFAULT_DIGEST is DigestAlgorithm.SHA256

    def test_iterations_from_env(self):
        """KEYDERIVE_DEFAULT_ITERATIONS is parsed as int."""
        with patch.dict(os.environ, {"KEYDERIVE_DEFAULT_ITERATIONS": "250000"}):
            fresh = Settings()
        assert fresh.DEFAULT_ITERATIONS == 250000

    def test_encoding_from_env(self):
        """KEYDERIVE_TEXT_ENCODING is applied."""
        with patch.dict(os.environ, {"KEYDERIVE_TEXT_ENCODING": "latin-1"}):
            fresh = Settings()
        assert fresh.TEXT_ENCODING == "latin-1"

    def test_rejects_unsupported_digest(self):
        """Unsupported default digest fails validation."""
        with patch.dict(os.environ, {"KEYDERIVE_DEFAULT_DIGEST": "md5"}):
            with pytest.raises(ValidationError):
                Settings()

    def test_rejects_zero_iterations(self):
        """KEYDERIVE_DEFAULT_ITERATIONS must be at least 1."""
        with patch.dict(os.environ, {"KEYDERIVE_DEFAULT_ITERATIONS": "0"}):
            with pytest.raises(ValidationError, match="DEFAULT_ITERATIONS must be at least 1"):
                Settings()

    def test_rejects_unknown_encoding(self):
        """KEYDERIVE_TEXT_ENCODING must name a known codec."""
        with patch.dict(os.environ, {"KEYDERIVE_TEXT_ENCODING": "not-a-codec"}):
            with pytest.raises(ValidationError, match="Unknown TEXT_ENCODING"):
                Settings()

    def test_unrelated_env_ignored(self):
        """Unknown variables do not break settings."""
        with patch.dict(os.environ, {"SOMETHING_ELSE": "1"}):
            fresh = Settings()
        assert fresh.DEFAULT_ITERATIONS == 10000


@pytest.mark.usefixtures("clean_env")
class TestHostApplicationIsolation:
    """A host application's own variables and .env never reach keyderive."""

    HOST_ENV = {
        "DEFAULT_DIGEST": "sha1",
        "DEFAULT_ITERATIONS": "1",
        "TEXT_ENCODING": "UTF8MB4",
    }

    def test_unprefixed_env_ignored(self):
        """Unprefixed DEFAULT_* and TEXT_ENCODING leave defaults untouched."""
        with patch.dict(os.environ, self.HOST_ENV):
            fresh = Settings()
        assert fresh.DEFAULT_DIGEST is DigestAlgorithm.SHA512
        assert fresh.DEFAULT_ITERATIONS == 10000
        assert fresh.TEXT_ENCODING == "utf-8"

    def test_dotenv_file_ignored(self, tmp_path, monkeypatch):
        """A .env in the working directory is not read, prefixed or not."""
        (tmp_path / ".env").write_text(
            "DEFAULT_ITERATIONS=1\n"
            "TEXT_ENCODING=UTF8MB4\n"
            "KEYDERIVE_DEFAULT_ITERATIONS=1\n"
        )
        monkeypatch.chdir(tmp_path)
        fresh = Settings()
        assert fresh.DEFAULT_ITERATIONS == 10000
        assert fresh.TEXT_ENCODING == "utf-8"

    def test_derive_defaults_unaffected_by_host_env(self):
        """derive() without digest/iterations still uses SHA512 x 10000."""
        with patch.dict(os.environ, self.HOST_ENV):
            fresh = Settings()
        with patch.object(pbkdf2, "settings", fresh):
            key = pbkdf2.derive(password="password", salt="NaCl", length=16)
        assert key == reference_pbkdf2("sha512", b"password", b"NaCl", 16, 10000)
        assert key.hex() == "eb4ce675f32365823156c6ff0c038769"

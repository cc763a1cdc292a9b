"""
Unit tests for environment configuration.
"""

import logging

import pytest

from s3media.config.settings import Settings, configure_logging, get_settings
from s3media.core.errors import ConfigurationError


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettingsFromEnvironment:
    """Tests for loading S3MEDIA_ variables."""

    def test_reads_prefixed_variables(self, monkeypatch):
        monkeypatch.setenv("S3MEDIA_BUCKET_NAME", "cms-media")
        monkeypatch.setenv("S3MEDIA_KEY_PREFIX", "uploads")
        monkeypatch.setenv("S3MEDIA_PUBLIC_URL_PREFIX", "https://cdn.example.com")
        monkeypatch.setenv("S3MEDIA_REGION_NAME", "eu-central-1")

        settings = get_settings()

        assert settings.bucket_name == "cms-media"
        assert settings.key_prefix == "uploads"
        assert settings.public_url_prefix == "https://cdn.example.com"
        assert settings.region_name == "eu-central-1"

    def test_mock_mode_flag(self, monkeypatch):
        monkeypatch.setenv("S3MEDIA_MOCK_MODE", "true")

        assert get_settings().mock_mode

    def test_settings_are_cached(self):
        assert get_settings() is get_settings()


class TestValidation:
    """Tests for required-field validation."""

    def test_bucket_required_outside_mock_mode(self):
        settings = Settings(bucket_name="", mock_mode=False)

        assert "S3MEDIA_BUCKET_NAME" in settings.validate_required_fields()

    def test_nothing_required_in_mock_mode(self):
        assert Settings(bucket_name="", mock_mode=True).validate_required_fields() == []

    def test_credentials_come_in_pairs(self):
        settings = Settings(bucket_name="b", access_key_id="AKIA")

        assert settings.validate_required_fields() == [
            "S3MEDIA_ACCESS_KEY_ID and S3MEDIA_SECRET_ACCESS_KEY"
        ]


class TestOptionBuilders:
    """Tests for turning settings into option objects."""

    def test_storage_options(self):
        settings = Settings(bucket_name="b", key_prefix="k", public_url_prefix="https://x")
        options = settings.storage_options()

        assert options.bucket_name == "b"
        assert options.key_prefix == "k"
        assert options.public_url_prefix == "https://x"

    def test_mock_mode_gets_placeholder_bucket(self):
        assert Settings(bucket_name="", mock_mode=True).storage_options().bucket_name == "mock-bucket"

    def test_storage_options_without_bucket_fail(self):
        with pytest.raises(ConfigurationError):
            Settings(bucket_name="", mock_mode=False).storage_options()

    def test_aws_options(self):
        settings = Settings(
            bucket_name="b",
            endpoint_url="http://localhost:9000",
            access_key_id="minio",
            secret_access_key="minio123",
        )
        options = settings.aws_options()

        assert options.endpoint_url == "http://localhost:9000"
        assert options.has_static_credentials


class TestConfigureLogging:
    def test_applies_log_level(self, monkeypatch):
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))

        configure_logging(Settings(log_level="debug"))

        assert calls["level"] == "DEBUG"
        assert "%(name)s" in calls["format"]

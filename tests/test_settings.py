"""
==============================================================================
Settings Tests
==============================================================================

Tests for environment-driven configuration.

==============================================================================
"""

from pathlib import Path

import pytest

from product_filter.config.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch):
    """Run each test away from any local .env and with no overrides set."""
    monkeypatch.chdir(tmp_path)
    for name in ("PRODUCTS_FILE", "CORS_ORIGINS", "DEBUG", "PORT"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestStorageSettings:
    """Tests for the products file location."""

    def test_default_products_file(self):
        assert Settings().products_path == Path("products.txt")

    def test_products_file_from_environment(self, monkeypatch):
        monkeypatch.setenv("PRODUCTS_FILE", "data/products.txt")
        assert Settings().products_path == Path("data/products.txt")

    def test_get_settings_creates_storage_directory(self, tmp_path: Path, monkeypatch):
        target = tmp_path / "nested" / "store" / "products.txt"
        monkeypatch.setenv("PRODUCTS_FILE", str(target))

        settings = get_settings()

        assert settings.products_path == target
        assert target.parent.is_dir()
        assert not target.exists()
        assert get_settings() is settings


class TestCorsSettings:
    """Tests for cors_origins_list."""

    def test_json_array(self):
        settings = Settings(cors_origins='["http://a.example", "http://b.example"]')
        assert settings.cors_origins_list == ["http://a.example", "http://b.example"]

    @pytest.mark.parametrize("raw", ["not json", '{"origin": "http://a"}', '"http://a"'])
    def test_non_array_allows_all(self, raw: str, caplog):
        settings = Settings(cors_origins=raw)
        assert settings.cors_origins_list == ["*"]
        assert "not a JSON array" in caplog.text

"""Tests pour Settings (pydantic-settings, prefixe MYHOME_)."""

from pathlib import Path

import pytest
from pydantic import ValidationError as PydanticValidationError

from myhome.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("MYHOME_DATABASE_URL", raising=False)
        settings = Settings(_env_file=None)

        assert settings.database_url == "sqlite:///data/myhome.db"
        assert settings.photos_dir == Path("data/photos")
        assert settings.default_page_size == 20
        assert settings.max_page_size == 100
        assert settings.strict_links is False
        assert ".jpg" in settings.allowed_photo_extensions

    def test_environment_overrides(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("MYHOME_DATABASE_URL", "postgresql://db/myhome")
        monkeypatch.setenv("MYHOME_PHOTOS_DIR", str(tmp_path))
        monkeypatch.setenv("MYHOME_STRICT_LINKS", "true")
        monkeypatch.setenv("MYHOME_MAX_PAGE_SIZE", "25")

        settings = Settings(_env_file=None)

        assert settings.database_url == "postgresql://db/myhome"
        assert settings.photos_dir == tmp_path
        assert settings.strict_links is True
        assert settings.max_page_size == 25

    def test_home_expanded(self):
        settings = Settings(_env_file=None, photos_dir="~/photos")
        assert settings.photos_dir == Path.home() / "photos"

    def test_extensions_normalized(self):
        settings = Settings(_env_file=None, allowed_photo_extensions=["JPG", ".PNG"])
        assert settings.allowed_photo_extensions == [".jpg", ".png"]

    def test_max_photo_size_bytes(self):
        settings = Settings(_env_file=None, max_photo_size_mb=2)
        assert settings.max_photo_size_bytes == 2 * 1024 * 1024

    def test_page_size_must_be_positive(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, default_page_size=0)

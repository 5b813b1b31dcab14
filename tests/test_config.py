"""Unit tests for app.core.config.Settings validators."""

import unittest

from pydantic import ValidationError

from app.core.config import Settings


def _settings(**overrides: object) -> Settings:
    return Settings(_env_file=None, **overrides)


class TestDatabaseUrl(unittest.TestCase):
    def test_accepts_postgres_and_sqlite(self) -> None:
        for url in (
            "postgresql+psycopg2://u:p@db:5432/userstore",
            "postgres://u:p@db/userstore",
            "sqlite:///userstore.db",
            "sqlite://",
        ):
            with self.subTest(url=url):
                self.assertEqual(_settings(DATABASE_URL=url).DATABASE_URL, url)

    def test_strips_whitespace(self) -> None:
        self.assertEqual(_settings(DATABASE_URL="  sqlite://  ").DATABASE_URL, "sqlite://")

    def test_rejects_other_schemes(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(DATABASE_URL="mysql://u:p@db/userstore")
        with self.assertRaises(ValidationError):
            _settings(DATABASE_URL="   ")


class TestOtherFields(unittest.TestCase):
    def test_bcrypt_rounds_bounds(self) -> None:
        self.assertEqual(_settings(BCRYPT_ROUNDS=4).BCRYPT_ROUNDS, 4)
        with self.assertRaises(ValidationError):
            _settings(BCRYPT_ROUNDS=3)
        with self.assertRaises(ValidationError):
            _settings(BCRYPT_ROUNDS=32)

    def test_api_prefix(self) -> None:
        self.assertEqual(_settings(API_V1_PREFIX="/api/v2/").API_V1_PREFIX, "/api/v2")
        with self.assertRaises(ValidationError):
            _settings(API_V1_PREFIX="api")

    def test_list_page_max(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(LIST_PAGE_MAX=0)

    def test_app_env_literal(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(APP_ENV="staging")


if __name__ == "__main__":
    unittest.main()

import io
import os
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest import mock

from handout_tracker import create_admin_hash
from handout_tracker.core.config import (
    DEV_JWT_SECRET,
    ConfigError,
    load_settings,
    normalize_database_url,
)
from handout_tracker.core.security import verify_password
from handout_tracker.initial_data import seed_super_admin
from handout_tracker.models.admin_model import Admin
from tests.support import ApiTestCase, make_settings


class LoadSettingsTests(unittest.TestCase):
    def load(self, **env):
        with TemporaryDirectory() as tmp, mock.patch.dict(os.environ, env, clear=True):
            return load_settings(Path(tmp) / ".env")

    def test_database_url_is_required(self) -> None:
        with self.assertRaises(ConfigError):
            self.load()

    def test_defaults(self) -> None:
        settings = self.load(DATABASE_URL="sqlite://")
        self.assertEqual(settings.jwt_secret, DEV_JWT_SECRET)
        self.assertTrue(settings.uses_dev_secret)
        self.assertEqual(settings.port, 9000)
        self.assertEqual(settings.token_ttl_hours, 24)
        self.assertEqual(settings.super_admin_username, "admin")

    def test_overrides(self) -> None:
        settings = self.load(
            DATABASE_URL="sqlite://",
            JWT_SECRET="prod",
            PORT="8080",
            CORS_ORIGINS="https://a.example, https://b.example",
        )
        self.assertEqual(settings.port, 8080)
        self.assertFalse(settings.uses_dev_secret)
        self.assertEqual(settings.cors_origins, ["https://a.example", "https://b.example"])

    def test_bad_integer(self) -> None:
        with self.assertRaises(ConfigError):
            self.load(DATABASE_URL="sqlite://", PORT="eighty")

    def test_postgres_urls_are_normalised(self) -> None:
        self.assertEqual(
            normalize_database_url("postgres://u:p@db:5432/finance"),
            "postgresql+psycopg2://u:p@db:5432/finance?sslmode=require",
        )
        self.assertEqual(
            normalize_database_url("postgresql://u:p@db/finance?application_name=x"),
            "postgresql+psycopg2://u:p@db/finance?application_name=x&sslmode=require",
        )
        self.assertEqual(
            normalize_database_url("postgresql://u:p@db/finance?sslmode=disable"),
            "postgresql+psycopg2://u:p@db/finance?sslmode=disable",
        )
        self.assertEqual(normalize_database_url("sqlite://"), "sqlite://")


class SeedTests(ApiTestCase):
    def test_seed_runs_once(self) -> None:
        db = self.app.state.session_factory()
        self.addCleanup(db.close)

        self.assertEqual(db.query(Admin).count(), 1)
        self.assertFalse(seed_super_admin(db, self.settings))
        self.assertEqual(db.query(Admin).count(), 1)

    def test_no_password_means_no_seed(self) -> None:
        db = self.app.state.session_factory()
        self.addCleanup(db.close)
        db.query(Admin).delete()
        db.commit()

        self.assertFalse(seed_super_admin(db, make_settings(admin_password=None)))
        self.assertEqual(db.query(Admin).count(), 0)


class CreateAdminHashTests(unittest.TestCase):
    def test_prints_verifiable_hash(self) -> None:
        out = io.StringIO()
        with redirect_stdout(out):
            code = create_admin_hash.main(["hunter22", "--username", "ops", "--rounds", "4"])
        self.assertEqual(code, 0)

        printed = out.getvalue()
        hashed = printed.splitlines()[0].split("Hash: ", 1)[1]
        self.assertTrue(verify_password("hunter22", hashed))
        self.assertIn("INSERT INTO admins", printed)
        self.assertIn("'ops'", printed)

    def test_short_password(self) -> None:
        with redirect_stdout(io.StringIO()), mock.patch("sys.stderr", new=io.StringIO()):
            self.assertEqual(create_admin_hash.main(["abc"]), 1)

    def test_password_over_bcrypt_limit(self) -> None:
        out = io.StringIO()
        with redirect_stdout(out), mock.patch("sys.stderr", new=io.StringIO()):
            self.assertEqual(create_admin_hash.main(["x" * 73, "--rounds", "4"]), 1)
        self.assertEqual(out.getvalue(), "")


if __name__ == "__main__":
    unittest.main()

import unittest

from fastapi.testclient import TestClient

from handout_tracker.app import create_app
from handout_tracker.core.config import Settings

SUPER_ADMIN_PASSWORD = "supersecret"


def make_settings(**overrides) -> Settings:
    values = dict(
        database_url="sqlite://",
        jwt_secret="test-secret",
        bcrypt_rounds=4,
        admin_password=SUPER_ADMIN_PASSWORD,
        log_level="WARNING",
    )
    values.update(overrides)
    return Settings(**values)


class ApiTestCase(unittest.TestCase):
    """Fresh in-memory database and a logged in super admin per test."""

    def setUp(self) -> None:
        self.settings = make_settings()
        self.app = create_app(self.settings)
        self.client = TestClient(self.app)
        self.client.__enter__()
        self.addCleanup(self.client.__exit__, None, None, None)
        self.headers = self.login("admin", SUPER_ADMIN_PASSWORD)

    def login(self, username: str, password: str) -> dict:
        resp = self.client.post("/login", json={"username": username, "password": password})
        self.assertEqual(resp.status_code, 200, resp.text)
        return {"Authorization": f"Bearer {resp.json()['data']['token']}"}

    def create_customer(self, name="Asha", mobile=9876543210, **extra) -> dict:
        body = {"name": name, "mobile": mobile, "address": "X", "info": "Y", **extra}
        resp = self.client.post("/customers", json=body, headers=self.headers)
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()["data"]

    def create_handout(self, customer_id: int, amount=5000, date="2025-01-15T00:00:00", **extra) -> dict:
        body = {"customerId": customer_id, "amount": amount, "date": date, **extra}
        resp = self.client.post("/handouts", json=body, headers=self.headers)
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()["data"]

    def create_collection(self, handout_id: int, amount=500, date="2025-02-01T00:00:00") -> dict:
        body = {"handoutId": handout_id, "amount": amount, "date": date}
        resp = self.client.post("/collections", json=body, headers=self.headers)
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()["data"]

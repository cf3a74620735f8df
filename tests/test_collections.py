import unittest

from handout_tracker.core.messages import (
    COLLECTION_NOT_FOUND_MSG,
    HANDOUT_NOT_FOUND_MSG,
    HANDOUT_REQUIRED_MSG,
    INVALID_AMOUNT_MSG,
)
from tests.support import ApiTestCase


class CollectionTests(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        customer = self.create_customer()
        self.handout = self.create_handout(customer["id"])

    def test_create_and_fetch(self) -> None:
        resp = self.client.post(
            "/collections",
            json={"handoutId": self.handout["id"], "amount": 300, "date": "2025-02-01T00:00:00"},
            headers=self.headers,
        )
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.json()["message"], "Collection created successfully")
        collection = resp.json()["data"]
        self.assertEqual(collection["handoutId"], self.handout["id"])

        fetched = self.client.get(f"/collections/{collection['id']}", headers=self.headers)
        self.assertEqual(fetched.json()["data"]["amount"], 300)

    def test_snake_case_payload_is_accepted(self) -> None:
        resp = self.client.post(
            "/collections",
            json={"handout_id": self.handout["id"], "amount": 20, "date": "2025-02-01T00:00:00"},
            headers=self.headers,
        )
        self.assertEqual(resp.status_code, 201)

    def test_create_validation(self) -> None:
        resp = self.client.post(
            "/collections", json={"amount": 10, "date": "2025-02-01T00:00:00"}, headers=self.headers
        )
        self.assertEqual(resp.json(), {"message": HANDOUT_REQUIRED_MSG})

        resp = self.client.post(
            "/collections",
            json={"handoutId": self.handout["id"], "amount": 0, "date": "2025-02-01T00:00:00"},
            headers=self.headers,
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"message": INVALID_AMOUNT_MSG})

    def test_non_finite_and_oversized_amounts_are_rejected(self) -> None:
        headers = {**self.headers, "Content-Type": "application/json"}
        for amount in ("NaN", "Infinity", "1e10"):
            body = f'{{"handoutId": {self.handout["id"]}, "amount": {amount}, "date": "2025-02-01T00:00:00"}}'
            resp = self.client.post("/collections", content=body, headers=headers)
            self.assertEqual(resp.status_code, 400, amount)
            self.assertEqual(resp.json(), {"message": INVALID_AMOUNT_MSG})

        data = self.client.get(f"/handouts/{self.handout['id']}", headers=self.headers).json()["data"]
        self.assertEqual(data["collectedTotal"], 0)
        self.assertEqual(data["balance"], self.handout["amount"])

    def test_create_for_unknown_handout(self) -> None:
        resp = self.client.post(
            "/collections", json={"handoutId": 999, "amount": 10, "date": "2025-02-01T00:00:00"}, headers=self.headers
        )
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["message"], HANDOUT_NOT_FOUND_MSG)

    def test_list_orders(self) -> None:
        early = self.create_collection(self.handout["id"], date="2025-01-01T00:00:00")
        late = self.create_collection(self.handout["id"], date="2025-06-01T00:00:00")
        middle = self.create_collection(self.handout["id"], date="2025-03-01T00:00:00")

        all_ids = [c["id"] for c in self.client.get("/collections", headers=self.headers).json()["data"]]
        self.assertEqual(all_ids, [middle["id"], late["id"], early["id"]])

        by_handout = self.client.get(f"/handouts/{self.handout['id']}/collections", headers=self.headers)
        self.assertEqual([c["id"] for c in by_handout.json()["data"]], [late["id"], middle["id"], early["id"]])

    def test_update_and_delete(self) -> None:
        collection = self.create_collection(self.handout["id"])

        resp = self.client.put(
            f"/collections/{collection['id']}",
            json={"handoutId": self.handout["id"], "amount": 999, "date": "2025-04-01T00:00:00"},
            headers=self.headers,
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["data"]["amount"], 999)

        resp = self.client.delete(f"/collections/{collection['id']}", headers=self.headers)
        self.assertEqual(resp.status_code, 200)

        resp = self.client.get(f"/collections/{collection['id']}", headers=self.headers)
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"message": COLLECTION_NOT_FOUND_MSG})

        resp = self.client.delete(f"/collections/{collection['id']}", headers=self.headers)
        self.assertEqual(resp.status_code, 404)

    def test_update_missing(self) -> None:
        resp = self.client.put(
            "/collections/999",
            json={"handoutId": self.handout["id"], "amount": 10, "date": "2025-04-01T00:00:00"},
            headers=self.headers,
        )
        self.assertEqual(resp.status_code, 404)


if __name__ == "__main__":
    unittest.main()

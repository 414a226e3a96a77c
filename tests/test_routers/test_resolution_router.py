import unittest
from datetime import date, datetime, time
from types import SimpleNamespace as Obj
from unittest.mock import MagicMock, patch
from fastapi.testclient import TestClient

from main import app
from core.database import get_db
from auth.services.auth_service import get_current_active_user
from scheduling.errors import EmployeeNotFound, InvalidDateRange
from scheduling.values import Interval


class ResolutionRouterTests(unittest.TestCase):
    def setUp(self):
        class FakeDB:
            def rollback(self): pass
        def _fake_db():
            yield FakeDB()

        app.dependency_overrides[get_db] = _fake_db
        app.dependency_overrides[get_current_active_user] = lambda: Obj(org_id=1)

        self.client = TestClient(app)
        self.resolver = MagicMock()
        patcher = patch("scheduling.router._resolver", return_value=self.resolver)
        self.mock_factory = patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self):
        app.dependency_overrides.pop(get_db, None)
        app.dependency_overrides.pop(get_current_active_user, None)

    def test_resolve_day(self):
        self.resolver.resolve.return_value = [Interval(time(9), time(13)), Interval(time(12), time(18))]
        resp = self.client.get("/api/employees/3/availability", params={"date": "2024-01-01"})
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(
            resp.json(),
            {
                "employee_id": 3,
                "date": "2024-01-01",
                "intervals": [{"start": "09:00", "end": "13:00"}, {"start": "12:00", "end": "18:00"}],
            },
        )
        self.resolver.resolve.assert_called_once_with(3, date(2024, 1, 1))
        self.assertEqual(self.mock_factory.call_args.args[1], 1)

    def test_resolve_day_unknown_employee(self):
        self.resolver.resolve.side_effect = EmployeeNotFound(3, 1)
        resp = self.client.get("/api/employees/3/availability", params={"date": "2024-01-01"})
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["detail"], "employee not found")

    def test_resolve_day_requires_date(self):
        resp = self.client.get("/api/employees/3/availability")
        self.assertEqual(resp.status_code, 422)

    def test_range(self):
        self.resolver.resolve_range.return_value = {
            date(2024, 1, 5): [Interval(time(9), time(18))],
            date(2024, 1, 6): [],
        }
        resp = self.client.get("/api/employees/3/availability/range", params={"from": "2024-01-05", "to": "2024-01-06"})
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual([d["date"] for d in resp.json()], ["2024-01-05", "2024-01-06"])
        self.assertEqual(resp.json()[1]["intervals"], [])

    def test_range_invalid(self):
        self.resolver.resolve_range.side_effect = InvalidDateRange("end date must be on or after start date")
        resp = self.client.get("/api/employees/3/availability/range", params={"from": "2024-01-06", "to": "2024-01-05"})
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(resp.json()["detail"], "end date must be on or after start date")

    def test_available_at(self):
        self.resolver.is_available_at.return_value = True
        resp = self.client.get("/api/employees/3/availability/at", params={"at": "2024-01-01T09:00:00"})
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json(), {"employee_id": 3, "available": True})
        self.resolver.is_available_at.assert_called_once_with(3, datetime(2024, 1, 1, 9, 0))

    def test_batch_resolve_not_shadowed_by_window_route(self):
        self.resolver.resolve_many.return_value = {3: [Interval(time(9), time(18))], 4: []}
        resp = self.client.get("/api/availability/resolve", params={"date": "2024-01-01", "employee_ids": [3, 4]})
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual([d["employee_id"] for d in resp.json()], [3, 4])
        self.resolver.resolve_many.assert_called_once_with([3, 4], date(2024, 1, 1))

    def test_batch_unknown_employee(self):
        self.resolver.resolve_many.side_effect = EmployeeNotFound(4, 1)
        resp = self.client.get("/api/availability/resolve", params={"date": "2024-01-01", "employee_ids": [3, 4]})
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["detail"], "employee 4 not found")


if __name__ == "__main__":
    unittest.main()

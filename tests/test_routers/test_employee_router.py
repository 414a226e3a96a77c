import unittest
from types import SimpleNamespace as Obj
from unittest.mock import patch
from fastapi.testclient import TestClient

from main import app
from core.database import get_db
from auth.services.auth_service import get_current_active_user
from authz.deps import require_manager


def employee(**kw):
    data = dict(id=1, org_id=1, first_name="Johanna", middle_name=None, last_name="Sig", user_id=None)
    data.update(kw)
    return Obj(**data)


class EmployeeRouterTests(unittest.TestCase):
    def setUp(self):
        class FakeDB:
            def rollback(self): pass
        def _fake_db():
            yield FakeDB()

        app.dependency_overrides[get_db] = _fake_db
        app.dependency_overrides[get_current_active_user] = lambda: Obj(org_id=1)
        app.dependency_overrides[require_manager] = lambda: None

        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.pop(get_db, None)
        app.dependency_overrides.pop(get_current_active_user, None)
        app.dependency_overrides.pop(require_manager, None)

    # --- LIST ---

    @patch("employee.router.service.get_employees")
    def test_get_employees_by_org_happy_path(self, mock_get):
        mock_get.return_value = [employee()]
        resp = self.client.get("/api/employees")
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(
            resp.json(),
            [{"id": 1, "org_id": 1, "first_name": "Johanna", "middle_name": None, "last_name": "Sig", "user_id": None}],
        )
        self.assertEqual(mock_get.call_args.kwargs["org_id"], 1)

    # --- CREATE ---

    @patch("employee.router.service.create_employee")
    def test_create_employee_201(self, mock_create):
        mock_create.return_value = employee(id=10, first_name="Jonas")
        resp = self.client.post("/api/employees", json={"first_name": "Jonas", "last_name": "Sig"})
        self.assertEqual(resp.status_code, 201, resp.text)
        dto = mock_create.call_args.args[1]
        self.assertEqual(dto.org_id, 1)
        self.assertEqual(dto.first_name, "Jonas")

    def test_create_employee_422_if_client_sends_org_id(self):
        # extra field should be rejected by the request model
        resp = self.client.post("/api/employees", json={"first_name": "Jonas", "last_name": "Sig", "org_id": 2})
        self.assertEqual(resp.status_code, 422)

    def test_create_employee_422_missing_last_name(self):
        resp = self.client.post("/api/employees", json={"first_name": "Jonas"})
        self.assertEqual(resp.status_code, 422)

    # --- GET /{id} ---

    @patch("employee.router.service.get_employee_for_org")
    def test_get_employee_200(self, mock_get_for_org):
        mock_get_for_org.return_value = employee()
        resp = self.client.get("/api/employees/1")
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()["first_name"], "Johanna")

    @patch("employee.router.service.get_employee_for_org")
    def test_get_employee_404(self, mock_get_for_org):
        mock_get_for_org.return_value = None
        resp = self.client.get("/api/employees/999")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["detail"], "employee not found")

    # --- PATCH /{id} ---

    @patch("employee.router.service.update_employee")
    @patch("employee.router.service.get_employee_for_org")
    def test_update_employee_200(self, mock_get_for_org, mock_update):
        mock_get_for_org.return_value = employee()
        mock_update.return_value = employee(middle_name="Rut")

        resp = self.client.patch("/api/employees/1", json={"middle_name": "Rut"})
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()["middle_name"], "Rut")

    @patch("employee.router.service.get_employee_for_org")
    def test_update_employee_404(self, mock_get_for_org):
        mock_get_for_org.return_value = None
        resp = self.client.patch("/api/employees/999", json={"first_name": "Nope"})
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["detail"], "employee not found")

    # --- DELETE /{id} ---

    @patch("employee.router.service.delete_employee")
    @patch("employee.router.service.get_employee_for_org")
    def test_delete_employee_200(self, mock_get_for_org, mock_delete):
        mock_get_for_org.return_value = employee()
        resp = self.client.delete("/api/employees/1")
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json(), {"message": "employee deleted"})
        mock_delete.assert_called_once()

    @patch("employee.router.service.get_employee_for_org")
    def test_delete_employee_404_missing(self, mock_get_for_org):
        mock_get_for_org.return_value = None
        resp = self.client.delete("/api/employees/999")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["detail"], "employee not found")


if __name__ == "__main__":
    unittest.main()

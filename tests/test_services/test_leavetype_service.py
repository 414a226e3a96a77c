import unittest
from datetime import date

from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

import models_bootstrap  # noqa: F401
from core.database import Base
from organization.models import Organization
from employee.models import Employee
from leave.models import LeaveBlock
from leavetype import service
from leavetype.schema import LeaveTypeCreate, LeaveTypeUpdate


class LeaveTypeServiceTests(unittest.TestCase):
    def setUp(self):
        self.engine = create_engine("sqlite:///:memory:", future=True)
        Base.metadata.create_all(self.engine)
        self.db = sessionmaker(bind=self.engine, future=True)()

        org1 = Organization(name="Org One")
        org2 = Organization(name="Org Two")
        self.db.add_all([org1, org2])
        self.db.commit()
        self.org1_id, self.org2_id = org1.id, org2.id

        self.vac = service.create_leave_type(
            self.db, LeaveTypeCreate(org_id=self.org1_id, name="Vacation", code="VAC", order=2)
        )
        self.sick = service.create_leave_type(
            self.db, LeaveTypeCreate(org_id=self.org1_id, name="Sick", code="SICK", order=1, description="doctor note")
        )
        self.unpaid = service.create_leave_type(
            self.db, LeaveTypeCreate(org_id=self.org1_id, name="Unpaid", code="UNP", order=1, is_paid=False)
        )

    def tearDown(self):
        self.db.close()
        self.engine.dispose()

    def test_defaults(self):
        self.assertTrue(self.vac.is_active)
        self.assertTrue(self.vac.is_paid)
        self.assertIsNone(self.vac.color)

    def test_list_ordered_by_order_then_name(self):
        rows = service.get_leave_types(self.db, org_id=self.org1_id)
        self.assertEqual([r.name for r in rows], ["Sick", "Unpaid", "Vacation"])
        self.assertEqual(service.get_leave_types(self.db, org_id=self.org2_id), [])

    def test_list_filters(self):
        rows = service.get_leave_types(self.db, org_id=self.org1_id, is_paid=False)
        self.assertEqual([r.name for r in rows], ["Unpaid"])

        rows = service.get_leave_types(self.db, org_id=self.org1_id, search="doctor")
        self.assertEqual([r.name for r in rows], ["Sick"])

        rows = service.get_leave_types(self.db, org_id=self.org1_id, search="vac")
        self.assertEqual([r.name for r in rows], ["Vacation"])

    def test_duplicate_name_in_org_raises(self):
        with self.assertRaises(IntegrityError):
            service.create_leave_type(self.db, LeaveTypeCreate(org_id=self.org1_id, name="Vacation", code="V2"))
        self.db.rollback()

    def test_same_name_in_other_org_ok(self):
        row = service.create_leave_type(self.db, LeaveTypeCreate(org_id=self.org2_id, name="Vacation", code="VAC"))
        self.assertEqual(row.org_id, self.org2_id)

    def test_get_for_org_scoped(self):
        self.assertIsNotNone(service.get_leave_type_for_org(self.db, self.vac.id, self.org1_id))
        self.assertIsNone(service.get_leave_type_for_org(self.db, self.vac.id, self.org2_id))

    def test_update_and_toggle(self):
        updated = service.update_leave_type(self.db, self.vac.id, LeaveTypeUpdate(color="#00AAFF"))
        self.assertEqual(updated.color, "#00AAFF")
        self.assertEqual(updated.name, "Vacation")

        self.assertFalse(service.toggle_leave_type(self.db, self.vac.id).is_active)
        rows = service.get_leave_types(self.db, org_id=self.org1_id, is_active=True)
        self.assertNotIn("Vacation", [r.name for r in rows])

    def test_update_missing_returns_none(self):
        self.assertIsNone(service.update_leave_type(self.db, 999, LeaveTypeUpdate(name="x")))
        self.assertIsNone(service.toggle_leave_type(self.db, 999))

    def test_delete(self):
        service.delete_leave_type(self.db, self.unpaid.id)
        self.assertIsNone(service.get_leave_type_for_org(self.db, self.unpaid.id, self.org1_id))

    def test_delete_referenced_by_leave_raises(self):
        emp = Employee(org_id=self.org1_id, first_name="Anna", last_name="Jonsdottir")
        self.db.add(emp)
        self.db.flush()
        self.db.add(LeaveBlock(
            org_id=self.org1_id, employee_id=emp.id, leave_type_id=self.vac.id,
            starts_on=date(2024, 1, 15), until=date(2024, 1, 16),
        ))
        self.db.commit()

        with self.assertRaises(IntegrityError):
            service.delete_leave_type(self.db, self.vac.id)
        self.db.rollback()
        self.assertIsNotNone(service.get_leave_type_for_org(self.db, self.vac.id, self.org1_id))


if __name__ == "__main__":
    unittest.main()

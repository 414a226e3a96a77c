import unittest
from datetime import date

from fastapi import HTTPException
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

import models_bootstrap  # noqa: F401
from core.database import Base
from organization.models import Organization
from employee.models import Employee
from leavetype.models import LeaveType
from leave import service
from leave.schema import LeaveCreate, LeaveUpdate
from scheduling.errors import EmployeeNotFound


class LeaveServiceTests(unittest.TestCase):
    def setUp(self):
        self.engine = create_engine("sqlite:///:memory:", future=True)
        Base.metadata.create_all(self.engine)
        self.db = sessionmaker(bind=self.engine, future=True)()

        org1 = Organization(name="Org One")
        org2 = Organization(name="Org Two")
        self.db.add_all([org1, org2])
        self.db.flush()
        self.org1_id, self.org2_id = org1.id, org2.id

        emp = Employee(org_id=self.org1_id, first_name="Anna", last_name="Jonsdottir")
        vacation = LeaveType(org_id=self.org1_id, name="Vacation", code="VAC")
        foreign_type = LeaveType(org_id=self.org2_id, name="Sick", code="SICK")
        self.db.add_all([emp, vacation, foreign_type])
        self.db.commit()
        self.emp_id = emp.id
        self.type_id = vacation.id
        self.foreign_type_id = foreign_type.id

    def tearDown(self):
        self.db.close()
        self.engine.dispose()

    def _create(self, starts_on, until, **overrides):
        data = dict(
            org_id=self.org1_id,
            employee_id=self.emp_id,
            leave_type_id=self.type_id,
            starts_on=starts_on,
            until=until,
        )
        data.update(overrides)
        return service.create_leave(self.db, LeaveCreate(**data))

    # ---- create ----
    def test_create_embeds_relations(self):
        row = self._create(date(2024, 1, 14), date(2024, 1, 16), note="ski trip")
        self.assertEqual(row.leave_type.code, "VAC")
        self.assertEqual(row.employee.last_name, "Jonsdottir")
        self.assertEqual(row.note, "ski trip")

    def test_create_rejects_inverted_range(self):
        with self.assertRaises(HTTPException) as ctx:
            self._create(date(2024, 1, 16), date(2024, 1, 14))
        self.assertEqual(ctx.exception.status_code, 422)
        self.assertEqual(ctx.exception.detail["errors"][0]["code"], "INVALID_RANGE")

    def test_create_rejects_leave_type_of_other_org(self):
        with self.assertRaises(HTTPException) as ctx:
            self._create(date(2024, 1, 14), date(2024, 1, 16), leave_type_id=self.foreign_type_id)
        self.assertEqual(ctx.exception.status_code, 404)
        self.assertEqual(ctx.exception.detail["errors"][0]["field"], "leave_type_id")

    # ---- list ----
    def test_list_from_to_containment(self):
        jan = self._create(date(2024, 1, 14), date(2024, 1, 16))
        feb = self._create(date(2024, 2, 1), date(2024, 2, 3))
        span = self._create(date(2024, 1, 30), date(2024, 2, 2))

        rows = service.get_leaves(self.db, org_id=self.org1_id)
        self.assertEqual([r.id for r in rows], [feb.id, span.id, jan.id])

        rows = service.get_leaves(self.db, org_id=self.org1_id, date_from=date(2024, 2, 1))
        self.assertEqual([r.id for r in rows], [feb.id])

        rows = service.get_leaves(self.db, org_id=self.org1_id, date_to=date(2024, 1, 31))
        self.assertEqual([r.id for r in rows], [jan.id])

        self.assertEqual(service.get_leaves(self.db, org_id=self.org2_id), [])

    # ---- employee lookups ----
    def test_on_leave_inclusive_bounds(self):
        self._create(date(2024, 1, 14), date(2024, 1, 16))
        check = lambda d: service.is_employee_on_leave(self.db, org_id=self.org1_id, employee_id=self.emp_id, on=d)
        self.assertFalse(check(date(2024, 1, 13)))
        self.assertTrue(check(date(2024, 1, 14)))
        self.assertTrue(check(date(2024, 1, 16)))
        self.assertFalse(check(date(2024, 1, 17)))

    def test_on_leave_unknown_employee(self):
        with self.assertRaises(EmployeeNotFound):
            service.is_employee_on_leave(self.db, org_id=self.org2_id, employee_id=self.emp_id, on=date(2024, 1, 1))

    def test_leaves_in_range_oldest_first(self):
        feb = self._create(date(2024, 2, 1), date(2024, 2, 3))
        jan = self._create(date(2024, 1, 14), date(2024, 1, 16))
        self._create(date(2024, 3, 1), date(2024, 3, 2))

        rows = service.get_employee_leaves_in_range(
            self.db, org_id=self.org1_id, employee_id=self.emp_id, start=date(2024, 1, 16), end=date(2024, 2, 1)
        )
        self.assertEqual([r.id for r in rows], [jan.id, feb.id])

    # ---- update / delete ----
    def test_update_validates_merged_range(self):
        row = self._create(date(2024, 1, 14), date(2024, 1, 16))
        with self.assertRaises(HTTPException):
            service.update_leave(self.db, row.id, LeaveUpdate(starts_on=date(2024, 1, 20)), org_id=self.org1_id)

        updated = service.update_leave(
            self.db, row.id, LeaveUpdate(until=date(2024, 1, 20), note="extended"), org_id=self.org1_id
        )
        self.assertEqual(updated.until, date(2024, 1, 20))
        self.assertEqual(updated.starts_on, date(2024, 1, 14))
        self.assertEqual(updated.note, "extended")

    def test_update_can_clear_note(self):
        row = self._create(date(2024, 1, 14), date(2024, 1, 16), note="x")
        updated = service.update_leave(self.db, row.id, LeaveUpdate(note=None), org_id=self.org1_id)
        self.assertIsNone(updated.note)

    def test_update_and_delete_scoped(self):
        row = self._create(date(2024, 1, 14), date(2024, 1, 16))
        self.assertIsNone(service.update_leave(self.db, row.id, LeaveUpdate(note="x"), org_id=self.org2_id))
        self.assertFalse(service.delete_leave(self.db, row.id, org_id=self.org2_id))
        self.assertTrue(service.delete_leave(self.db, row.id, org_id=self.org1_id))
        self.assertIsNone(service.get_leave_for_org(self.db, row.id, self.org1_id))


if __name__ == "__main__":
    unittest.main()

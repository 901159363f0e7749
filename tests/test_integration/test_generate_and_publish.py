import unittest
from datetime import time

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from core.database import Base, get_db
from restaurant.models import Restaurant
from employee.models import Employee
from businesshours.models import BusinessHours
from staffing.models import StaffingRequirement


class GenerateAndPublishFlowTests(unittest.TestCase):
    def setUp(self):
        self.engine = create_engine(
            "sqlite:///:memory:",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            future=True,
        )
        Base.metadata.create_all(self.engine)
        self.SessionLocal = sessionmaker(bind=self.engine, future=True)

        # --- Dependency overrides ---
        def _get_db_override():
            db = self.SessionLocal()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = _get_db_override
        self.client = TestClient(app)

        # --- Seed restaurant, staff, Mon-Fri 09-17 and a busy Friday evening ---
        with self.SessionLocal() as db:
            r = Restaurant(name="Pelau Palace")
            db.add(r)
            db.flush()
            self.restaurant_id = r.id
            db.add_all([
                Employee(restaurant_id=r.id, first_name="Ana", last_name="Lee", hourly_rate=20),
                Employee(restaurant_id=r.id, first_name="Ben", last_name="Roy", hourly_rate=25),
                Employee(restaurant_id=r.id, first_name="Meg", last_name="Boss", role="manager"),
            ])
            db.add_all([
                BusinessHours(restaurant_id=r.id, day_of_week=d, open_time=time(9), close_time=time(17), is_closed=d >= 5)
                for d in range(7)
            ])
            db.add(StaffingRequirement(
                restaurant_id=r.id, day_of_week=4, time_slot_start=time(9), time_slot_end=time(13),
                min_staff_required=3, optimal_staff=3,
            ))
            db.commit()

    def tearDown(self):
        app.dependency_overrides.pop(get_db, None)
        self.engine.dispose()

    def _url(self, suffix):
        return f"/api/restaurants/{self.restaurant_id}{suffix}"

    def test_full_generate_publish_flow(self):
        # 1) Generate a proposal
        r = self.client.post(self._url("/schedules/generate"), json={"week_start": "2025-03-03"})
        self.assertEqual(r.status_code, 200, r.text)
        proposal = r.json()

        # Mon-Thu default coverage (2 each) + Friday requirement filled by the two non-managers
        self.assertEqual(len(proposal["shifts"]), 10)
        self.assertIn("Could not meet minimum staffing (3) for 2025-03-07 09:00-13:00", proposal["warnings"])
        self.assertEqual(proposal["stats"]["employees_scheduled"], 2)

        # nothing stored yet
        r = self.client.get(self._url("/shifts"))
        self.assertEqual(r.json(), [])

        # 2) Publish it
        r = self.client.post(self._url("/schedules/publish"), json={
            "week_start": "2025-03-03",
            "shifts": proposal["shifts"],
            "warnings": proposal["warnings"],
            "stats": proposal["stats"],
        })
        self.assertEqual(r.status_code, 201, r.text)
        run = r.json()
        self.assertEqual(run["status"], "published")
        self.assertEqual(run["total_shifts"], 10)

        # 3) Shifts now stored and linked to the run
        r = self.client.get(self._url("/shifts?start=2025-03-03&end=2025-03-09"))
        stored = r.json()
        self.assertEqual(len(stored), 10)
        self.assertTrue(all(s["generation_run_id"] == run["id"] for s in stored))

        r = self.client.get(self._url("/shifts/conflicts?start=2025-03-03&end=2025-03-09"))
        self.assertEqual(r.json(), {})

        # 4) Publishing the same week again clashes with what is stored
        r = self.client.post(self._url("/schedules/publish"), json={
            "week_start": "2025-03-03",
            "shifts": proposal["shifts"],
            "stats": proposal["stats"],
        })
        self.assertEqual(r.status_code, 409, r.text)

        # 5) Audit history
        r = self.client.get(self._url("/schedules/runs"))
        self.assertEqual([x["id"] for x in r.json()], [run["id"]])

    def test_manual_shift_blocks_conflicting_entry(self):
        emp_id = 1
        body = {"employee_id": emp_id, "shift_date": "2025-03-03", "start_time": "09:00", "end_time": "17:00"}
        r = self.client.post(self._url("/shifts"), json=body)
        self.assertEqual(r.status_code, 201, r.text)

        body["start_time"], body["end_time"] = "16:00", "20:00"
        r = self.client.post(self._url("/shifts"), json=body)
        self.assertEqual(r.status_code, 409)
        self.assertEqual(r.json()["detail"], "Time overlap with existing shift: 09:00 - 17:00")

        body["start_time"], body["end_time"] = "17:00", "20:00"
        r = self.client.post(self._url("/shifts"), json=body)
        self.assertEqual(r.status_code, 201, r.text)

    def test_unknown_restaurant(self):
        r = self.client.post("/api/restaurants/999/schedules/generate", json={"week_start": "2025-03-03"})
        self.assertEqual(r.status_code, 404)

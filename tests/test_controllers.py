from __future__ import annotations

from datetime import date
from decimal import Decimal
from types import SimpleNamespace

import pytest
from flask import Flask

from src.staff_ops.staff_ops.bonus.controller import register as register_bonus
from src.staff_ops.staff_ops.bonus.service import BonusService
from src.staff_ops.staff_ops.core.enums import PerformanceEventType
from src.staff_ops.staff_ops.core.policy import CompanyPolicy
from src.staff_ops.staff_ops.damages.controller import register as register_damages
from src.staff_ops.staff_ops.damages.service import DamageService
from src.staff_ops.staff_ops.mileage.controller import register as register_mileage
from src.staff_ops.staff_ops.mileage.service import MileageService
from src.staff_ops.staff_ops.performance.controller import register as register_performance
from src.staff_ops.staff_ops.performance.service import PerformanceService


class FakeEmployees:
    def __init__(self, employees):
        self._employees = employees

    def get_by_id(self, employee_id):
        return next((e for e in self._employees if e.employee_id == employee_id), None)

    def list_all(self, *, active_only=False):
        return [e for e in self._employees if e.is_active or not active_only]


class EmptyWindowRepo:
    def list_between(self, *, start_date, end_date):
        return []

    def list_within(self, *, start_date, end_date):
        return []


class FakeMileage(EmptyWindowRepo):
    def __init__(self):
        self.created = []

    def create_entry(self, *, employee_id, entry_date, miles, amount, job_id=None):
        self.created.append((employee_id, entry_date, miles, amount))
        return "m1"


class FakeDamages(EmptyWindowRepo):
    def __init__(self):
        self.created = []

    def create_damage(self, *, employee_ids, description, amount, was_reported, logged_on, job_id=None):
        self.created.append((tuple(employee_ids), amount, was_reported, logged_on))
        return "d1"


class FakeEvents(EmptyWindowRepo):
    def __init__(self):
        self.created = []

    def create_event(self, *, employee_id, event_type, event_date, description=None):
        self.created.append((employee_id, event_type, event_date))
        return "e1"


@pytest.fixture
def client(make_employee):
    employees = FakeEmployees([make_employee("a", start=date(2020, 1, 1)), make_employee("b", start=date(2020, 1, 1))])
    policy = CompanyPolicy()
    mileage_repo = FakeMileage()
    damages_repo = FakeDamages()
    performance_repo = FakeEvents()
    container = SimpleNamespace(
        policy=policy,
        mileage_repo=mileage_repo,
        damages_repo=damages_repo,
        performance_repo=performance_repo,
        bonus_service=BonusService(
            employees, damages_repo, performance_repo, mileage_repo, EmptyWindowRepo(), policy=policy
        ),
        mileage_service=MileageService(mileage_repo, employees, policy=policy),
        damage_service=DamageService(damages_repo, employees),
        performance_service=PerformanceService(performance_repo, employees),
    )

    app = Flask(__name__)
    app.secret_key = "test-secret"
    register_bonus(app, container)
    register_mileage(app, container)
    register_damages(app, container)
    register_performance(app, container)
    client = app.test_client()
    client.container = container
    return client


def sign_in(client, employee_id="a", can_manage=True):
    with client.session_transaction() as sess:
        sess["employee_id"] = employee_id
        sess["can_manage"] = can_manage


def test_bonus_requires_session(client):
    resp = client.post("/api/admin/bonus", json={"revenue": 10000})
    assert resp.status_code == 401


def test_bonus_requires_admin_capability(client):
    sign_in(client, can_manage=False)
    resp = client.post("/api/admin/bonus", json={"revenue": 10000})
    assert resp.status_code == 403


def test_bonus_returns_report(client):
    sign_in(client)
    resp = client.post("/api/admin/bonus", json={"revenue": "10000", "year": 2026, "month": 1})

    assert resp.status_code == 200
    report = resp.get_json()["report"]
    assert report["gross_pool"] == "450.00"
    assert report["tenure_pool"] == "225.00"
    assert [p["tenure_amount"] for p in report["payouts"]] == ["112.50", "112.50"]


def test_bonus_rejects_non_positive_revenue(client):
    sign_in(client)
    resp = client.post("/api/admin/bonus", json={"revenue": 0})

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_bonus_policy_endpoint(client):
    sign_in(client)
    policy_address = client.container.policy.warehouse_address
    resp = client.get("/api/admin/bonus/policy")

    assert resp.get_json() == {
        "mileage_rate": "0.60",
        "default_pool_percentage": "4.5",
        "unreported_damage_multiplier": "2",
        "tardy_cutoff": "07:15",
        "warehouse_address": policy_address,
    }


def test_staff_logs_own_mileage(client):
    sign_in(client, employee_id="b", can_manage=False)
    resp = client.post("/api/mileage", json={"date": "2026-01-03", "miles": "20"})

    assert resp.status_code == 201
    assert client.container.mileage_repo.created[0][0] == "b"


def test_staff_cannot_log_mileage_for_others(client):
    sign_in(client, employee_id="b", can_manage=False)
    resp = client.post("/api/mileage", json={"employee_id": "a", "date": "2026-01-03", "miles": "20"})

    assert resp.status_code == 403


def test_mileage_rejects_bad_date(client):
    sign_in(client)
    resp = client.post("/api/mileage", json={"date": "03/01/2026", "miles": "20"})

    assert resp.status_code == 400


def test_admin_logs_damage(client):
    sign_in(client)
    resp = client.post(
        "/api/admin/damages",
        json={
            "employee_ids": ["a", "b"],
            "description": "Broken lamp",
            "amount": "75",
            "was_reported": False,
            "date": "2026-01-08",
        },
    )

    assert resp.status_code == 201
    assert resp.get_json() == {"success": True, "damage_id": "d1"}
    assert client.container.damages_repo.created == [(("a", "b"), Decimal("75"), False, date(2026, 1, 8))]


def test_damage_logging_requires_admin(client):
    sign_in(client, can_manage=False)
    resp = client.post("/api/admin/damages", json={"employee_ids": ["a"], "description": "Lamp", "amount": 5})

    assert resp.status_code == 403
    assert client.container.damages_repo.created == []


def test_damage_logging_rejects_negative_amount(client):
    sign_in(client)
    resp = client.post("/api/admin/damages", json={"employee_ids": ["a"], "description": "Lamp", "amount": -5})

    assert resp.status_code == 400


def test_admin_logs_performance_event(client):
    sign_in(client)
    resp = client.post(
        "/api/admin/performance",
        json={"employee_id": "b", "event_type": "customer_callout", "date": "2026-01-10"},
    )

    assert resp.status_code == 201
    assert client.container.performance_repo.created == [
        ("b", PerformanceEventType.CUSTOMER_CALLOUT, date(2026, 1, 10))
    ]


def test_performance_event_rejects_unknown_type(client):
    sign_in(client)
    resp = client.post("/api/admin/performance", json={"employee_id": "b", "event_type": "thumbs_up"})

    assert resp.status_code == 400
    assert client.container.performance_repo.created == []

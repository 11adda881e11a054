from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from src.staff_ops.staff_ops.bonus.calculator import pool_calculator
from src.staff_ops.staff_ops.bonus.calculator.pool_calculator import BonusEngine
from src.staff_ops.staff_ops.core.enums import PerformanceEventType
from src.staff_ops.staff_ops.core.policy import CompanyPolicy
from src.staff_ops.staff_ops.damages.model import Damage
from src.staff_ops.staff_ops.mileage.model import MileageEntry
from src.staff_ops.staff_ops.perfect_weeks.model import PerfectWeek
from src.staff_ops.staff_ops.performance.model import PerformanceEvent

AS_OF = date(2026, 1, 15)


def damage(amount, *, reported: bool) -> Damage:
    return Damage(damage_id="d", amount=Decimal(str(amount)), was_reported=reported, logged_on=date(2026, 1, 3))


def event(employee_id: str, event_type=PerformanceEventType.FIVE_STAR_REVIEW) -> PerformanceEvent:
    return PerformanceEvent(event_id="e", employee_id=employee_id, event_type=event_type, event_date=date(2026, 1, 5))


def trip(employee_id: str, miles) -> MileageEntry:
    miles = Decimal(str(miles))
    return MileageEntry(
        entry_id="m", employee_id=employee_id, entry_date=date(2026, 1, 6), miles=miles, amount=miles * Decimal("0.60")
    )


def test_pool_without_damages_splits_evenly():
    result = BonusEngine().calculate(total_revenue=10000, pool_percentage=4.5, as_of=AS_OF)

    assert result.gross_pool == Decimal("450.00")
    assert result.damages_deducted == Decimal("0.00")
    assert result.net_pool == Decimal("450.00")
    assert result.tenure_pool == Decimal("225.00")
    assert result.performance_pool == Decimal("225.00")
    assert result.payouts == ()


def test_unreported_damage_is_doubled():
    result = BonusEngine().calculate(
        total_revenue=10000, pool_percentage=4.5, as_of=AS_OF, damages=[damage(100, reported=False)]
    )

    assert result.damages_deducted == Decimal("200.00")
    assert result.net_pool == Decimal("250.00")
    assert result.tenure_pool == Decimal("125.00")


def test_reported_damage_counts_once():
    result = BonusEngine().calculate(
        total_revenue=10000,
        pool_percentage=4.5,
        as_of=AS_OF,
        damages=[damage(100, reported=True), damage("25.50", reported=False)],
    )

    assert result.damages_deducted == Decimal("151.00")
    assert result.net_pool == Decimal("299.00")


def test_tenure_pool_follows_months_of_service(make_employee):
    employees = [
        make_employee("a", start=date(2025, 10, 15)),
        make_employee("b", start=date(2025, 12, 15)),
    ]

    result = BonusEngine().calculate(total_revenue=10000, pool_percentage=4.5, as_of=AS_OF, employees=employees)

    assert result.total_tenure_shares == 4
    a, b = result.payouts
    assert (a.tenure_shares, b.tenure_shares) == (3, 1)
    assert a.tenure_amount == Decimal("168.75")
    assert b.tenure_amount == Decimal("56.25")
    # nobody was recognized, so the performance pool stays undistributed
    assert result.total_performance_score == 0
    assert a.performance_amount == b.performance_amount == Decimal("0.00")
    assert a.total_amount == Decimal("168.75")


def test_damages_above_gross_pool_clamp_to_zero_but_mileage_is_paid(make_employee):
    employees = [make_employee("a", start=date(2024, 1, 1)), make_employee("b", start=date(2025, 1, 1))]

    result = BonusEngine().calculate(
        total_revenue=10000,
        pool_percentage=4.5,
        as_of=AS_OF,
        employees=employees,
        damages=[damage(300, reported=False)],
        performance_events=[event("a"), event("b")],
        mileage_entries=[trip("a", 100), trip("a", "12.5")],
    )

    assert result.damages_deducted == Decimal("600.00")
    assert result.net_pool == Decimal("0.00")
    assert result.tenure_pool == result.performance_pool == Decimal("0.00")
    a, b = result.payouts
    assert a.tenure_amount == a.performance_amount == Decimal("0.00")
    assert a.mileage_amount == Decimal("67.50")
    assert a.total_amount == Decimal("67.50")
    assert b.total_amount == Decimal("0.00")


def test_performance_points_ignore_event_type(make_employee):
    employees = [make_employee("a", start=AS_OF), make_employee("b", start=AS_OF)]
    events = [
        event("a", PerformanceEventType.FIVE_STAR_REVIEW),
        event("a", PerformanceEventType.CREW_CALLOUT),
        event("a", PerformanceEventType.CUSTOMER_CALLOUT),
        event("b", PerformanceEventType.CREW_CALLOUT),
    ]

    result = BonusEngine().calculate(
        total_revenue=10000, pool_percentage=4.5, as_of=AS_OF, employees=employees, performance_events=events
    )

    assert result.total_performance_score == 4
    a, b = result.payouts
    assert a.performance_amount == Decimal("168.75")
    assert b.performance_amount == Decimal("56.25")
    # both started today: no tenure shares at all
    assert result.total_tenure_shares == 0
    assert a.tenure_amount == b.tenure_amount == Decimal("0.00")


def test_inactive_employees_and_their_records_are_left_out(make_employee):
    employees = [make_employee("a", start=date(2025, 1, 15)), make_employee("gone", start=date(2020, 1, 1), active=False)]

    result = BonusEngine().calculate(
        total_revenue=10000,
        pool_percentage=4.5,
        as_of=AS_OF,
        employees=employees,
        performance_events=[event("a"), event("gone"), event("gone")],
    )

    assert [p.employee_id for p in result.payouts] == ["a"]
    assert result.total_tenure_shares == 12
    assert result.total_performance_score == 1
    assert result.payouts[0].tenure_amount == Decimal("225.00")
    assert result.payouts[0].performance_amount == Decimal("225.00")


def test_future_start_date_gets_zero_shares(make_employee):
    employees = [make_employee("new", start=date(2026, 3, 1)), make_employee("old", start=date(2025, 12, 1))]

    result = BonusEngine().calculate(total_revenue=10000, pool_percentage=4.5, as_of=AS_OF, employees=employees)

    new, old = result.payouts
    assert new.tenure_months == 0
    assert new.tenure_shares == 0
    assert new.tenure_amount == Decimal("0.00")
    assert old.tenure_amount == Decimal("225.00")


def test_perfect_weeks_are_counted_but_not_paid(make_employee):
    employees = [make_employee("a", start=date(2025, 1, 1))]
    weeks = [
        PerfectWeek("a", date(2026, 1, 5), date(2026, 1, 11), achieved=True),
        PerfectWeek("a", date(2026, 1, 12), date(2026, 1, 18), achieved=False),
        PerfectWeek("a", date(2026, 1, 19), date(2026, 1, 25), achieved=True),
    ]

    result = BonusEngine().calculate(
        total_revenue=10000, pool_percentage=4.5, as_of=AS_OF, employees=employees, perfect_weeks=weeks
    )

    payout = result.payouts[0]
    assert payout.perfect_week_hours == 2
    assert payout.perfect_week_amount == Decimal("0.00")


def test_payout_sums_stay_within_rounding_tolerance(make_employee):
    employees = [make_employee(k, start=date(2025, 12, 15)) for k in ("a", "b", "c")]

    result = BonusEngine().calculate(
        total_revenue=4444,
        pool_percentage=4.5,
        as_of=AS_OF,
        employees=employees,
        performance_events=[event("a"), event("b"), event("c")],
        mileage_entries=[trip("b", 10), trip("c", "3.3")],
    )

    tolerance = Decimal("0.01") * len(employees)
    assert abs(sum(p.tenure_amount for p in result.payouts) - result.tenure_pool) <= tolerance
    assert abs(sum(p.performance_amount for p in result.payouts) - result.performance_pool) <= tolerance
    assert abs(result.tenure_pool + result.performance_pool - result.net_pool) <= Decimal("0.01")
    assert sum(p.mileage_amount for p in result.payouts) == Decimal("7.98")
    assert result.total_disbursed > result.net_pool


def test_mileage_does_not_touch_the_pool(make_employee):
    employees = [make_employee("a", start=date(2025, 1, 1))]
    engine = BonusEngine()

    without = engine.calculate(total_revenue=10000, pool_percentage=4.5, as_of=AS_OF, employees=employees)
    with_trips = engine.calculate(
        total_revenue=10000,
        pool_percentage=4.5,
        as_of=AS_OF,
        employees=employees,
        mileage_entries=[trip("a", 40)],
    )

    assert with_trips.net_pool == without.net_pool
    assert with_trips.tenure_pool == without.tenure_pool
    assert with_trips.payouts[0].mileage_amount == Decimal("24.00")
    assert with_trips.payouts[0].total_amount == without.payouts[0].total_amount + Decimal("24.00")


def test_same_inputs_give_same_result(make_employee):
    employees = (make_employee("a", start=date(2024, 6, 1)), make_employee("b", start=date(2025, 6, 1)))
    kwargs = dict(
        total_revenue="12345.67",
        pool_percentage="5",
        as_of=AS_OF,
        employees=employees,
        damages=(damage(10, reported=False),),
        performance_events=(event("b"),),
        mileage_entries=(trip("a", 7),),
    )
    engine = BonusEngine()

    assert engine.calculate(**kwargs) == engine.calculate(**kwargs)


def test_policy_drives_defaults_and_rates(make_employee):
    policy = CompanyPolicy(
        mileage_rate=Decimal("0.50"),
        default_pool_percentage=Decimal("10"),
        unreported_damage_multiplier=Decimal("3"),
    )
    employees = [make_employee("a", start=date(2025, 1, 1))]

    result = BonusEngine(policy).calculate(
        total_revenue=1000,
        as_of=AS_OF,
        employees=employees,
        damages=[damage(10, reported=False)],
        mileage_entries=[trip("a", 10)],
    )

    assert result.pool_percentage == Decimal("10")
    assert result.gross_pool == Decimal("100.00")
    assert result.damages_deducted == Decimal("30.00")
    assert result.net_pool == Decimal("70.00")
    assert result.payouts[0].mileage_amount == Decimal("5.00")


def test_per_call_policy_overrides_engine_policy():
    engine = BonusEngine(CompanyPolicy(default_pool_percentage=Decimal("10")))

    result = engine.calculate(total_revenue=1000, as_of=AS_OF, policy=CompanyPolicy())

    assert result.gross_pool == Decimal("45.00")


def test_as_of_defaults_to_now(monkeypatch, make_employee):
    monkeypatch.setattr(pool_calculator, "now_local", lambda: datetime(2026, 4, 1, 8, 0))
    employees = [make_employee("a", start=date(2026, 1, 1))]

    result = BonusEngine().calculate(total_revenue=10000, pool_percentage=4.5, employees=employees)

    assert result.payouts[0].tenure_months == 3


def test_engine_accepts_out_of_range_inputs_without_raising():
    result = BonusEngine().calculate(total_revenue=-500, pool_percentage=150, as_of=AS_OF)

    assert result.gross_pool == Decimal("-750.00")
    assert result.net_pool == Decimal("0.00")


def test_inputs_are_not_mutated(make_employee):
    employees = [make_employee("a", start=date(2025, 1, 1)), make_employee("x", start=date(2025, 1, 1), active=False)]
    events = [event("a")]
    before = (list(employees), list(events))

    BonusEngine().calculate(
        total_revenue=10000, pool_percentage=4.5, as_of=AS_OF, employees=employees, performance_events=events
    )

    assert (employees, events) == before


def test_result_serializes_amounts_as_cents(make_employee):
    employees = [make_employee("a", start=date(2025, 10, 15))]

    data = BonusEngine().calculate(
        total_revenue=10000, pool_percentage=4.5, as_of=AS_OF, employees=employees
    ).to_dict()

    assert data["gross_pool"] == "450.00"
    assert data["total_tenure_shares"] == 3
    assert data["payouts"][0]["tenure_amount"] == "225.00"
    assert data["payouts"][0]["perfect_week_amount"] == "0.00"

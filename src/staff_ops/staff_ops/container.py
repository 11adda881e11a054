from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .bonus.calculator.pool_calculator import BonusEngine
from .bonus.service import BonusService
from .checklists.mysql_checklist_repository import MySQLChecklistRepository
from .checklists.service import ChecklistService
from .core.policy import CompanyPolicy
from .damages.mysql_damage_repository import MySQLDamageRepository
from .damages.service import DamageService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .mileage.mysql_mileage_repository import MySQLMileageRepository
from .mileage.service import MileageService
from .perfect_weeks.mysql_perfect_week_repository import MySQLPerfectWeekRepository
from .perfect_weeks.service import PerfectWeekService
from .performance.mysql_performance_repository import MySQLPerformanceEventRepository
from .performance.service import PerformanceService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection
    policy: CompanyPolicy

    employees_repo: MySQLEmployeeRepository
    attendance_repo: MySQLAttendanceRepository
    checklists_repo: MySQLChecklistRepository
    damages_repo: MySQLDamageRepository
    performance_repo: MySQLPerformanceEventRepository
    mileage_repo: MySQLMileageRepository
    perfect_weeks_repo: MySQLPerfectWeekRepository

    attendance_service: AttendanceService
    checklist_service: ChecklistService
    mileage_service: MileageService
    perfect_week_service: PerfectWeekService
    damage_service: DamageService
    performance_service: PerformanceService
    bonus_service: BonusService


def build_container(*, db_config: dict, policy: Optional[CompanyPolicy] = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    policy = policy or CompanyPolicy()

    employees_repo = MySQLEmployeeRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    checklists_repo = MySQLChecklistRepository(conn)
    damages_repo = MySQLDamageRepository(conn)
    performance_repo = MySQLPerformanceEventRepository(conn)
    mileage_repo = MySQLMileageRepository(conn)
    perfect_weeks_repo = MySQLPerfectWeekRepository(conn)

    attendance_service = AttendanceService(attendance_repo, employees_repo, policy=policy)
    checklist_service = ChecklistService(checklists_repo, employees_repo)
    mileage_service = MileageService(mileage_repo, employees_repo, policy=policy)
    perfect_week_service = PerfectWeekService(perfect_weeks_repo, attendance_repo, checklists_repo, employees_repo)
    damage_service = DamageService(damages_repo, employees_repo)
    performance_service = PerformanceService(performance_repo, employees_repo)
    bonus_service = BonusService(
        employees_repo,
        damages_repo,
        performance_repo,
        mileage_repo,
        perfect_weeks_repo,
        policy=policy,
        calculator=BonusEngine(policy),
    )

    return Container(
        conn=conn,
        policy=policy,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        checklists_repo=checklists_repo,
        damages_repo=damages_repo,
        performance_repo=performance_repo,
        mileage_repo=mileage_repo,
        perfect_weeks_repo=perfect_weeks_repo,
        attendance_service=attendance_service,
        checklist_service=checklist_service,
        mileage_service=mileage_service,
        perfect_week_service=perfect_week_service,
        damage_service=damage_service,
        performance_service=performance_service,
        bonus_service=bonus_service,
    )

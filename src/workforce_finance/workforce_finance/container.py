from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .analytics.service import AnalyticsService
from .attendance.service import AttendanceService
from .attendance.store_repository import StoreAttendanceRepository
from .core.policy import DEFAULT_POLICY, FinancePolicy
from .database.connection import DBConfig, DatabaseConnection
from .employees.service import EmployeeService
from .employees.store_repository import StoreEmployeeRepository
from .insights.service import InsightService
from .insights.store_repository import StoreInsightRepository
from .payroll.service import PayrollReportService
from .projects.service import ProjectService
from .projects.store_repository import StoreProjectRepository
from .storage.memory_store import InMemoryKeyValueStore
from .storage.mysql_store import MySQLKeyValueStore
from .storage.store import KeyValueStore


@dataclass(frozen=True)
class Container:
    store: KeyValueStore
    policy: FinancePolicy

    employees_repo: StoreEmployeeRepository
    projects_repo: StoreProjectRepository
    attendance_repo: StoreAttendanceRepository
    insights_repo: StoreInsightRepository

    employee_service: EmployeeService
    project_service: ProjectService
    attendance_service: AttendanceService
    analytics_service: AnalyticsService
    insight_service: InsightService
    payroll_report_service: PayrollReportService


def build_store(*, backend: str = "mysql", db_config: Optional[dict] = None) -> KeyValueStore:
    if backend == "memory":
        return InMemoryKeyValueStore()
    if backend == "mysql":
        return MySQLKeyValueStore(DatabaseConnection.get_instance(DBConfig.from_dict(db_config or {})))
    raise ValueError(f"Unknown STORE_BACKEND: {backend}")


def build_container(*, store: KeyValueStore, policy: FinancePolicy = DEFAULT_POLICY) -> Container:
    employees_repo = StoreEmployeeRepository(store)
    projects_repo = StoreProjectRepository(store)
    attendance_repo = StoreAttendanceRepository(store)
    insights_repo = StoreInsightRepository(store)

    return Container(
        store=store,
        policy=policy,
        employees_repo=employees_repo,
        projects_repo=projects_repo,
        attendance_repo=attendance_repo,
        insights_repo=insights_repo,
        employee_service=EmployeeService(employees_repo, attendance_repo, policy=policy),
        project_service=ProjectService(projects_repo, employees_repo, attendance_repo, policy=policy),
        attendance_service=AttendanceService(attendance_repo, employees_repo),
        analytics_service=AnalyticsService(employees_repo, projects_repo, attendance_repo, policy=policy),
        insight_service=InsightService(insights_repo, employees_repo, projects_repo, attendance_repo, policy=policy),
        payroll_report_service=PayrollReportService(employees_repo, projects_repo, attendance_repo, policy=policy),
    )


def build_container_from_settings(settings: Any) -> Container:
    store = build_store(
        backend=str(getattr(settings, "STORE_BACKEND", "mysql")).lower(),
        db_config=getattr(settings, "DB_CONFIG", None),
    )
    return build_container(store=store, policy=FinancePolicy.from_settings(settings))

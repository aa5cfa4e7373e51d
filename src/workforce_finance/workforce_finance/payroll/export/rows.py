"""Flat, human-labelled records for CSV/JSON downloads."""

from __future__ import annotations

from typing import Optional, Sequence

from ...attendance.model import AttendanceRecord
from ...common.money import percentage, round_to
from ...core.policy import DEFAULT_POLICY, FinancePolicy
from ...employees.model import Employee
from ...finance.formulas import calculate_financials
from ...finance.model import FinancialCalculation
from ...projects.model import ManpowerProject
from ..calculator.standard_calculator import UNASSIGNED
from ..model import PayrollCalculation, PayrollSummary, ProjectPayroll

NOT_AVAILABLE = "N/A"


def employee_columns(currency: str = DEFAULT_POLICY.currency) -> list[str]:
    return [
        "Employee ID",
        "Name",
        "Trade",
        "Nationality",
        "Phone",
        f"Hourly Rate ({currency})",
        f"Actual Rate ({currency})",
        "Profit Margin (%)",
        "Project",
        "Status",
        "Performance Rating",
        "Skills",
        "Certifications",
        "Emergency Contact",
    ]


def attendance_columns(currency: str = DEFAULT_POLICY.currency) -> list[str]:
    return [
        "Date",
        "Employee ID",
        "Employee Name",
        "Trade",
        "Project",
        "Regular Hours",
        "Overtime Hours",
        "Total Hours",
        f"Labor Cost ({currency})",
        f"Revenue ({currency})",
        f"Profit ({currency})",
        "Profit Margin (%)",
        "Location",
        "Approved By",
        "Notes",
    ]


PROJECT_COLUMNS = [
    "Project ID",
    "Name",
    "Client",
    "Location",
    "Status",
    "Start Date",
    "End Date",
    "Budget",
    "Progress (%)",
    "Risk Level",
    "Declared Margin (%)",
]

PAYROLL_COLUMNS = [
    "Employee ID",
    "Employee Name",
    "Trade",
    "Project",
    "Regular Hours",
    "Overtime Hours",
    "Total Hours",
    "Hourly Rate",
    "Regular Pay",
    "Overtime Pay",
    "Gross Pay",
    "GOSI",
    "Deductions",
    "Net Pay",
    "Client Billing",
    "Profit Generated",
    "Attendance Days",
]

PROJECT_PAYROLL_COLUMNS = [
    "Project",
    "Client",
    "Employees",
    "Total Hours",
    "Total Cost",
    "Client Billing",
    "Profit",
    "Profit Margin %",
]

SUMMARY_COLUMNS = ["Metric", "Value"]


def _project_name(project: Optional[ManpowerProject]) -> str:
    return project.name if project else UNASSIGNED


def employee_row(
    employee: Employee,
    project: Optional[ManpowerProject] = None,
    *,
    currency: str = DEFAULT_POLICY.currency,
) -> dict:
    margin = percentage(employee.actual_rate - employee.hourly_rate, employee.actual_rate)
    return {
        "Employee ID": employee.employee_code,
        "Name": employee.name,
        "Trade": employee.trade,
        "Nationality": employee.nationality,
        "Phone": employee.phone_number,
        f"Hourly Rate ({currency})": employee.hourly_rate,
        f"Actual Rate ({currency})": employee.actual_rate,
        "Profit Margin (%)": round_to(margin, 1),
        "Project": _project_name(project),
        "Status": employee.status.value,
        "Performance Rating": employee.performance_rating if employee.performance_rating is not None else NOT_AVAILABLE,
        "Skills": ", ".join(employee.skills),
        "Certifications": ", ".join(employee.certifications),
        "Emergency Contact": employee.emergency_contact or NOT_AVAILABLE,
    }


def attendance_row(
    record: AttendanceRecord,
    employee: Employee,
    project: Optional[ManpowerProject] = None,
    *,
    policy: FinancePolicy = DEFAULT_POLICY,
) -> dict:
    fin = calculate_financials(
        record.hours_worked,
        record.overtime,
        employee.hourly_rate,
        employee.actual_rate,
        overtime_multiplier=policy.overtime_multiplier,
    )
    currency = policy.currency
    return {
        "Date": record.date,
        "Employee ID": employee.employee_code,
        "Employee Name": employee.name,
        "Trade": employee.trade,
        "Project": _project_name(project),
        "Regular Hours": record.hours_worked,
        "Overtime Hours": record.overtime,
        "Total Hours": record.total_hours,
        f"Labor Cost ({currency})": fin.labor_cost,
        f"Revenue ({currency})": fin.revenue,
        f"Profit ({currency})": fin.profit,
        "Profit Margin (%)": round_to(fin.profit_margin, 1),
        "Location": record.location or NOT_AVAILABLE,
        "Approved By": record.approved_by or NOT_AVAILABLE,
        "Notes": record.notes or NOT_AVAILABLE,
    }


def project_row(project: ManpowerProject, financials: Optional[FinancialCalculation] = None) -> dict:
    row = {
        "Project ID": project.id,
        "Name": project.name,
        "Client": project.client,
        "Location": project.location,
        "Status": project.status.value,
        "Start Date": project.start_date,
        "End Date": project.end_date,
        "Budget": project.budget,
        "Progress (%)": project.progress,
        "Risk Level": project.risk_level.value,
        "Declared Margin (%)": project.profit_margin,
    }
    if financials is not None:
        row.update(
            {
                "Revenue": financials.revenue,
                "Labor Cost": financials.labor_cost,
                "Profit": financials.profit,
                "Actual Margin (%)": financials.profit_margin,
            }
        )
    return row


def financial_summary_rows(financials: FinancialCalculation) -> list[dict]:
    return [
        {"Metric": "Total Hours", "Value": financials.total_hours},
        {"Metric": "Regular Pay", "Value": financials.regular_pay},
        {"Metric": "Overtime Pay", "Value": financials.overtime_pay},
        {"Metric": "Labor Cost", "Value": financials.labor_cost},
        {"Metric": "Revenue", "Value": financials.revenue},
        {"Metric": "Profit", "Value": financials.profit},
        {"Metric": "Profit Margin %", "Value": financials.profit_margin},
        {"Metric": "Effective Rate", "Value": financials.effective_rate},
    ]


def payroll_row(calc: PayrollCalculation) -> dict:
    return {
        "Employee ID": calc.employee_code,
        "Employee Name": calc.employee_name,
        "Trade": calc.trade,
        "Project": calc.project_name,
        "Regular Hours": calc.regular_hours,
        "Overtime Hours": calc.overtime_hours,
        "Total Hours": calc.total_hours,
        "Hourly Rate": calc.hourly_rate,
        "Regular Pay": calc.regular_pay,
        "Overtime Pay": calc.overtime_pay,
        "Gross Pay": calc.gross_pay,
        "GOSI": calc.gosi_contribution,
        "Deductions": calc.other_deductions,
        "Net Pay": calc.net_pay,
        "Client Billing": calc.client_billing,
        "Profit Generated": calc.profit_generated,
        "Attendance Days": calc.attendance_days,
    }


def project_payroll_row(group: ProjectPayroll) -> dict:
    return {
        "Project": group.project_name,
        "Client": group.client,
        "Employees": group.employee_count,
        "Total Hours": group.total_hours,
        "Total Cost": group.total_cost,
        "Client Billing": group.total_billing,
        "Profit": group.total_profit,
        "Profit Margin %": group.profit_margin,
    }


def summary_rows(summary: PayrollSummary) -> list[dict]:
    return [
        {"Metric": "Total Employees", "Value": summary.employee_count},
        {"Metric": "Total Gross Pay", "Value": summary.total_gross_pay},
        {"Metric": "Total Net Pay", "Value": summary.total_net_pay},
        {"Metric": "Total GOSI Contributions", "Value": summary.total_gosi_contributions},
        {"Metric": "Total Other Deductions", "Value": summary.total_other_deductions},
        {"Metric": "Total Hours", "Value": summary.total_hours},
        {"Metric": "Total Client Billing", "Value": summary.total_client_billing},
        {"Metric": "Total Profit Generated", "Value": summary.total_profit_generated},
        {"Metric": "Profit Margin %", "Value": summary.profit_margin},
    ]


def payroll_rows(calculations: Sequence[PayrollCalculation]) -> list[dict]:
    return [payroll_row(c) for c in calculations]

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Sequence

from ...core.constants import DEFAULT_COMPANY_NAME, DEFAULT_CURRENCY, DEFAULT_GOSI_RATE
from ..model import PayrollCalculation
from .text_format import hours, money, percent_label, timestamp

PAGE_RULE = "=" * 80
SLIP_RULE = "=" * 50


def render_payslips(
    calculations: Sequence[PayrollCalculation],
    *,
    month: str,
    generated_at: datetime,
    company: str = DEFAULT_COMPANY_NAME,
    currency: str = DEFAULT_CURRENCY,
    gosi_rate: Decimal = DEFAULT_GOSI_RATE,
) -> str:
    """Plain-text payslips, one block per employee, in the given order."""

    lines = [
        f"{company} - PAYSLIPS",
        f"Month: {month}",
        f"Generated on: {timestamp(generated_at)}",
        PAGE_RULE,
        "",
    ]

    for n, calc in enumerate(calculations, start=1):
        lines += [
            f"PAYSLIP {n}",
            SLIP_RULE,
            f"Employee: {calc.employee_name}",
            f"Employee ID: {calc.employee_code}",
            f"Trade: {calc.trade}",
            f"Project: {calc.project_name}",
            f"Month: {month}",
            "",
            "EARNINGS:",
            f"Regular Hours ({hours(calc.regular_hours)}h): {money(calc.regular_pay)} {currency}",
            f"Overtime Hours ({hours(calc.overtime_hours)}h): {money(calc.overtime_pay)} {currency}",
            f"Gross Pay: {money(calc.gross_pay)} {currency}",
            "",
            "DEDUCTIONS:",
            f"GOSI Contribution ({percent_label(gosi_rate)}): {money(calc.gosi_contribution)} {currency}",
            f"Other Deductions: {money(calc.other_deductions)} {currency}",
            f"Total Deductions: {money(calc.total_deductions)} {currency}",
            "",
            f"NET PAY: {money(calc.net_pay)} {currency}",
            "",
            "Employee Signature: ________________________",
            "Date: ________________________",
            "",
            PAGE_RULE,
            "",
        ]

    return "\n".join(lines) + "\n"

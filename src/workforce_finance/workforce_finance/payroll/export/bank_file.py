from __future__ import annotations

from datetime import datetime
from typing import Sequence

from ...common.money import dsum
from ...core.constants import DEFAULT_COMPANY_NAME, DEFAULT_CURRENCY
from ..model import PayrollCalculation
from .text_format import money, timestamp

ACCOUNT_PLACEHOLDER = "[Bank Account Number]"


def render_bank_transfer(
    calculations: Sequence[PayrollCalculation],
    *,
    month: str,
    generated_at: datetime,
    company: str = DEFAULT_COMPANY_NAME,
    currency: str = DEFAULT_CURRENCY,
) -> str:
    """Salary transfer instructions: one record per employee, then a SUMMARY block.

    Totals are taken from the same calculations that are listed.
    """

    lines = [
        f"BANK TRANSFER FILE - {month}",
        f"Generated on: {timestamp(generated_at)}",
        f"Company: {company}",
        "",
    ]

    for n, calc in enumerate(calculations, start=1):
        lines += [
            f"Record {n}:",
            f"Employee: {calc.employee_name}",
            f"Employee ID: {calc.employee_code}",
            f"Amount: {money(calc.net_pay)} {currency}",
            f"Account: {ACCOUNT_PLACEHOLDER}",
            f"Reference: Salary {month}",
            f"Project: {calc.project_name}",
            "",
        ]

    lines += [
        "SUMMARY:",
        f"Total Amount: {money(dsum(c.net_pay for c in calculations))} {currency}",
        f"Total Records: {len(calculations)}",
        f"Total GOSI: {money(dsum(c.gosi_contribution for c in calculations))} {currency}",
    ]

    return "\n".join(lines) + "\n"

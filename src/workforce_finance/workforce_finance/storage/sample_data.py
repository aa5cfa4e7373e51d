"""Demo workforce used by ``scripts/seed_db.py`` and ``AUTO_SEED_DB``.

Dates are relative to the seeding day so dashboards, trends and expiry
alerts always have something to show.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

from .store import ATTENDANCE_KEY, EMPLOYEES_KEY, INSIGHTS_KEY, PROJECTS_KEY

_EMPLOYEES = [
    # id, code, name, name_ar, trade, nationality, phone, hourly, actual, project, status, rating
    ("emp_001", "EMP001", "Ahmed Al-Rashid", "أحمد الراشد", "Site Supervisor", "Saudi", "+966501234567", "35.00", "55.00", "proj_001", "active", 92),
    ("emp_002", "EMP002", "Mohammad Hassan", "محمد حسن", "Heavy Equipment Operator", "Pakistani", "+966502345678", "28.00", "45.00", "proj_001", "active", 88),
    ("emp_003", "EMP003", "Ali Al-Mahmoud", "علي المحمود", "Electrician", "Egyptian", "+966503456789", "32.00", "50.00", "proj_002", "active", 90),
    ("emp_004", "EMP004", "Fatima Al-Zahra", "فاطمة الزهراء", "Safety Officer", "Saudi", "+966504567890", "30.00", "48.00", "proj_002", "active", 95),
    ("emp_005", "EMP005", "Rajesh Kumar", "راجيش كومار", "Welder", "Indian", "+966505678901", "25.00", "40.00", None, "active", 85),
    ("emp_006", "EMP006", "Jose Santos", "خوسيه سانتوس", "Plumber", "Filipino", "+966506789012", "24.00", "38.00", "proj_003", "inactive", 80),
]

_DOCUMENT_OFFSETS = {
    # employee id -> [(doc id, name, type, days from seeding day)]
    "emp_001": [("doc_001", "Saudi National ID", "iqama", 365), ("doc_002", "Safety Certificate", "certificate", 400)],
    "emp_002": [("doc_003", "Work Visa", "visa", 5)],
    "emp_003": [("doc_005", "Iqama", "iqama", 15)],
    "emp_005": [("doc_007", "Welding Certificate", "certificate", 120)],
}

_PROJECTS = [
    # id, name, client, location, budget, status, progress, risk, declared margin
    ("proj_001", "NEOM Infrastructure Phase 1", "NEOM Company", "Tabuk", "2500000", "active", 65, "medium", "35.5"),
    ("proj_002", "Riyadh Metro Maintenance", "Royal Commission for Riyadh City", "Riyadh", "1200000", "active", 40, "low", "22.0"),
    ("proj_003", "Jeddah Port Expansion", "Saudi Ports Authority", "Jeddah", "800000", "hold", 15, "high", "18.0"),
]


def _employees(today: date, stamp: str) -> list[dict]:
    out = []
    for (eid, code, name, name_ar, trade, nat, phone, hourly, actual, project, status, rating) in _EMPLOYEES:
        docs = [
            {
                "id": did,
                "name": dname,
                "type": dtype,
                "expiry_date": (today + timedelta(days=offset)).isoformat(),
                "notes": None,
            }
            for did, dname, dtype, offset in _DOCUMENT_OFFSETS.get(eid, [])
        ]
        out.append(
            {
                "id": eid,
                "employee_code": code,
                "name": name,
                "name_ar": name_ar,
                "trade": trade,
                "nationality": nat,
                "phone_number": phone,
                "hourly_rate": hourly,
                "actual_rate": actual,
                "project_id": project,
                "status": status,
                "performance_rating": rating,
                "skills": [],
                "certifications": [],
                "documents": docs,
                "emergency_contact": None,
                "created_at": stamp,
                "updated_at": stamp,
            }
        )
    return out


def _projects(today: date, stamp: str) -> list[dict]:
    return [
        {
            "id": pid,
            "name": name,
            "client": client,
            "location": location,
            "start_date": (today - timedelta(days=120)).isoformat(),
            "end_date": (today + timedelta(days=240)).isoformat(),
            "budget": budget,
            "status": status,
            "progress": progress,
            "risk_level": risk,
            "profit_margin": margin,
            "description": None,
            "status_history": [],
            "created_at": stamp,
            "updated_at": stamp,
        }
        for (pid, name, client, location, budget, status, progress, risk, margin) in _PROJECTS
    ]


def _attendance(today: date, stamp: str, *, days: int = 35) -> list[dict]:
    records = []
    for offset in range(days, -1, -1):
        day = today - timedelta(days=offset)
        # Friday is the weekly rest day.
        if day.weekday() == 4:
            continue
        for n, (eid, *_rest) in enumerate(_EMPLOYEES[:5]):
            # every fifth day one worker is absent
            if (offset + n) % 5 == 0:
                continue
            overtime = (offset + n) % 3
            records.append(
                {
                    "id": f"att_{eid}_{day.isoformat()}",
                    "employee_id": eid,
                    "date": day.isoformat(),
                    "hours_worked": "8",
                    "overtime": str(overtime),
                    "break_time": 60,
                    "late_arrival": 0,
                    "early_departure": 0,
                    "location": None,
                    "notes": None,
                    "created_at": stamp,
                    "updated_at": stamp,
                }
            )
    return records


def build_sample_collections(today: date) -> dict[str, list[dict]]:
    stamp = datetime.combine(today, datetime.min.time()).isoformat()
    return {
        EMPLOYEES_KEY: _employees(today, stamp),
        PROJECTS_KEY: _projects(today, stamp),
        ATTENDANCE_KEY: _attendance(today, stamp),
        INSIGHTS_KEY: [],
    }

"""Workforce Finance package.

This package is organized by feature modules (employees, projects, attendance,
finance, analytics, insights, payroll) with a thin Flask controller layer and
service/repository layers over a key-value store.
"""

"""Attendance Reconciliation package.

Feature modules (calendar_rules, punches, attendance, payroll, ...) turn raw
punches into daily attendance records and cross-check them against payroll,
behind a thin Flask controller layer and service/repository layers.
"""

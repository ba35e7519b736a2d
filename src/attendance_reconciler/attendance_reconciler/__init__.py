"""Attendance Reconciler package.

Feature modules (attendance, holidays, reports, enhancement) hold the
service layer; a thin Flask controller exposes them as a JSON API.
"""

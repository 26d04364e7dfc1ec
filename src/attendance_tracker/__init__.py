"""Attendance Tracker package.

Organized by feature modules (students, attendance, projection, ...)
with a thin Flask controller layer and service/repository layers.
"""

"""Presensi client package.

This package is organized by feature modules (session, records, presensi, ...)
with a thin Flask controller layer on top of async view-models.
"""

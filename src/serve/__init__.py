"""Dashboard serving components.

This module runs inxi, renders category views of system reports,
and exposes them over a local Flask HTTP application.
"""

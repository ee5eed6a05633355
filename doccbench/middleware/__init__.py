"""Middleware package for FastAPI request/response processing.

This package contains middleware that records request timings into the
benchmark log.
"""

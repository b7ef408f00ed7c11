"""
Utility Package
===============

Logging and printing helpers.
"""

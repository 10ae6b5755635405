"""
Core infrastructure: settings, logging configuration and database access.
"""

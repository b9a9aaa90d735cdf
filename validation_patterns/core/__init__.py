"""
Core package: application configuration.
"""

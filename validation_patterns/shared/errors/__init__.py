"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that failures raised anywhere
in the application are consistently translated into Problem Details
responses by a single boundary component.
"""

"""
Security middleware: secure response headers and rate limiting.
"""

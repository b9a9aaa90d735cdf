"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Error handling and Problem Details responses
- Request correlation identifiers
- Security middleware
- Rate limiting
- Logging configuration
"""

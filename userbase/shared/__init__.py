"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Error normalization and rendering
- Security middleware
- Rate limiting
- Logging configuration and access logs
"""

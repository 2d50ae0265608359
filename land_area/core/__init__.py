"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Named constants, unit ratios, sample inputs
- exceptions: Custom exception hierarchy
- ingress: HTTP request/response boundary helpers
"""

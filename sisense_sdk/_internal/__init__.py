"""Internal modules for Sisense SDK.

These are implementation details of `SisenseClient` and may change without
notice.

Modules:
    http - Shared HTTP client configuration
    redaction - Masking of sensitive values in debug output
"""

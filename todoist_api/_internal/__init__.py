"""Internal modules for the Todoist API client.

WARNING: These modules back the public request helper and are not intended
for direct use in application code.

Modules:
    http - HTTP client factory and header set
    models - Request descriptor model
    redaction - Credential masking for debug output
"""

"""
Remote Export

A migration destination that POSTs each migrated row to a remote HTTP
endpoint and maps the endpoint's JSON response back into destination
identifiers.

Supports:
- Per-row endpoint URLs read from a row property
- JSON, URL-encoded form and multipart request bodies
- Identifier extraction from scalar or object JSON responses
"""

__version__ = "0.1.0"

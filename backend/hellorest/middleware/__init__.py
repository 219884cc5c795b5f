"""
HelloRest — Middleware Package
===============================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [Error Normalizer] → [GZip] → [CORS] → Route

    1. Request ID: correlation ID for every log line and the response header
    2. Logging: method, path, status, duration (sees the normalized 503s)
    3. Error Normalizer: turns any exception raised below it into
       `error : <message>` with the configured error status
"""

"""
Grandma Recipes API: Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware chain (outermost first):
    Request → [Body Size] → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Body Size rejects oversized payloads before anything reads the body
    2. Request ID sets the correlation ID used by every later log line
    3. Logging records method, path, status and duration with that ID
"""

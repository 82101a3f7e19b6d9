# Middleware package init
"""
Notes Backend — Middleware Package
====================================

Middleware Chain (order matters!):
    Request → [CORS] → [Request ID] → [Access Log] → Route Handler

    1. CORS outermost, so every response (errors included) carries its headers
    2. Request ID next; it also turns unhandled exceptions into a 500 body
    3. Access log records status and duration once the handler returns

Responses travel back through the same chain in reverse, which is where the
X-Request-ID header is attached.
"""

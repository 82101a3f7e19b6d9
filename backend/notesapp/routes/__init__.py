"""
Notes Backend — Route Handlers Package
========================================

    - notes:  CRUD endpoints under the API prefix
    - health: GET /health for monitoring
"""

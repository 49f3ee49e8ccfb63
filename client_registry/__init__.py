"""
Client Registry.

- api/: HTTP endpoints (health, clients)
- core/: configuration, logging, errors, middleware, responses
- repositories/: in-memory client store
- schemas/: pydantic request/response models
- services/: business logic
"""

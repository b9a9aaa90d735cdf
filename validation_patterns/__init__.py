"""
Validation Patterns: request validation in a minimal FastAPI service.

Application package root. Compares two ways of putting request
validation in front of business logic for a single "post" resource:

    - filter: a validation wrapper applied per route.
    - pipeline: a validation behavior inside a central mediator,
      with a global exception handler translating failures to HTTP.

Layers:
    - domain: Post entity, repository port, domain errors.
    - application: Validation core, mediator, use cases, DTOs.
    - infrastructure: In-memory repository adapter.
    - interfaces: FastAPI routers, Pydantic schemas, validation filter.
    - shared: Cross-cutting concerns (errors, security, logging).
"""

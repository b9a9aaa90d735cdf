"""
Interfaces layer package.

Contains FastAPI routers, Pydantic request/response schemas, the
per-route validation filter and the dependency providers that wire
everything together. No business logic belongs here.
Routes call use cases (directly or through the mediator) and
return responses.
"""

"""
HTTP interface for the posts bounded context.

Two route groups expose the same operations:
    - /filter-posts/: validated by a per-route filter.
    - /pipeline-behavior-posts/: dispatched through the mediator,
      validated by its pipeline behavior.
"""

"""
Domain layer package.

Contains pure business objects: entities, port interfaces and errors.
This layer has ZERO external dependencies.
No framework imports, no IO, no side effects.
"""

"""
Application layer package.

Contains the validation core, the mediator with its pipeline
behaviors, and the use cases that orchestrate domain logic.
Each use case is a single class with one public method.
This layer depends on domain ports, never on infrastructure.
"""

"""
Application layer for the posts bounded context.

Use cases coordinate the Post entity and the PostRepository port.
No framework or infrastructure imports allowed.
"""

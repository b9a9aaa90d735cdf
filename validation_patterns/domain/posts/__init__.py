"""
Posts bounded context: domain layer.

A post is a title and a body of content identified by an opaque UUID.
Posts are created and updated but never deleted.
"""

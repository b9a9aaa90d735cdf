"""
Infrastructure adapters for the posts bounded context.
"""

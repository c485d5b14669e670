"""Infrastructure layer.

Configuration, database access and repository implementations.
"""

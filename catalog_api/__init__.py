"""Catalog API.

Read-only REST API over a product catalog with hypermedia links.
"""

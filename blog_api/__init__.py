"""
Blog API Package

FastAPI service exposing CRUD endpoints for blog posts.
"""

__version__ = "0.1.0"

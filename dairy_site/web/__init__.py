"""
Server-side rendering helpers: Jinja environment and icon set.
"""

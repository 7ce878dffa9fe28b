"""
ARIB Dairy public site and content admin panel.
"""

__version__ = "1.0.0"

"""
PhongNews backend - user approval workflow and shared resort data over a key-value store.
"""

__version__ = "1.0.0"

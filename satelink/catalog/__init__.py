"""
Event catalog for the INTEGRA event log.
"""

from satelink.catalog.catalog import EventCatalog

__all__ = ["EventCatalog"]

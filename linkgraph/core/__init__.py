"""
Core graph data structures and management.

This module contains the fundamental graph representation, its mutation
and query operations, and the LinkGraph facade.
"""

from .graph import Graph

__all__ = ['Graph']

"""
Operations that populate a graph with common topologies.
"""

from .builders import simple_complete, bidi_line, line

__all__ = ['simple_complete', 'bidi_line', 'line']

"""
Network analysis modules for reachability and path finding.
"""

from .traversal import NetworkTraversal
from .pathfinding import PathFinder, ShortestPath

__all__ = ['NetworkTraversal', 'PathFinder', 'ShortestPath']

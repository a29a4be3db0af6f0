"""
Bill Manager - Source Package

An interactive terminal tracker for the bills of a single session.

DESIGN PRINCIPLES:
1. Bills live in memory only and are keyed by name
2. An empty line always means "go back"
3. Not-found is an answer, not an error
4. Every action is auditable
5. Storage layer is swappable
"""

__version__ = "1.0.0"

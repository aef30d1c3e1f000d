"""
Feasible CLI - Command-line interface for level campaigns.

This package provides a CLI for inspecting levels and checking player
systems without writing Python.

Usage:
    feasible-cli list-levels
    feasible-cli polygon 1
    feasible-cli check 3 player.yaml
    feasible-cli status 3 4 2
    feasible-cli segment 3
"""

__version__ = "0.1.0"

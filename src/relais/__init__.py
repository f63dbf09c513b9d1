"""
Relais - signature relay backend for governance votes and delegations.
"""

__version__ = "0.1.0"

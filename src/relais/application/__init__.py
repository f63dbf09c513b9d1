"""
Relais application layer.
"""

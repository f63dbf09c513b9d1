"""
Relais presentation layer.
"""

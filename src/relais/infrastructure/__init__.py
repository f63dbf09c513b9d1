"""
Relais infrastructure layer.
"""

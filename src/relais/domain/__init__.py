"""
Relais domain layer.
"""

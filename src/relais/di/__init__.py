"""
Dependency injection.
"""

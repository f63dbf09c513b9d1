"""
Application services.
"""

from relais.application.services.eligibility_checker import (
    EligibilityChecker,
    gather_reads,
)

__all__ = ["EligibilityChecker", "gather_reads"]

"""
Pathwise: learner modeling and recommendation engine.

Keeps a per-learner profile and turns it, together with session history,
into insights, recommendations, difficulty adjustments, outcome
predictions, achievements and career guidance.
"""

__version__ = "0.1.0"

"""Spatial Prisoner's Dilemma: imitate-the-best evolution on a bounded grid."""

__version__ = "0.1.0"

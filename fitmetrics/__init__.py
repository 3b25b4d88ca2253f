"""Fitness metrics: heart-rate zones, activity durations, pulse points, calories and step counting."""

__version__ = "0.1.0"
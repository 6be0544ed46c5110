"""Workout interval timer."""

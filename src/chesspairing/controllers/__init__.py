"""Controllers that coordinate players, rounds and results."""

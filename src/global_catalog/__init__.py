"""Propagate a shared version catalog through nested builds."""

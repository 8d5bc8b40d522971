"""Barco: dodge the cannonballs, grab the driftwood."""

"""Couche Infrastructure: configuration, logging et persistance."""

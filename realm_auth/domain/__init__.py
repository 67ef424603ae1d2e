"""Couche Domain: exceptions et value objects."""

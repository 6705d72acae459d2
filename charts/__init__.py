"""JSON front-end for the geometry layout engine."""

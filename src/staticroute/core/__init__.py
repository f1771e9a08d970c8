"""Core request resolution."""

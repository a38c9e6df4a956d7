"""Pure scoring functions and data models."""

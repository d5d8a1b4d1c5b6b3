"""Team, match and table models."""

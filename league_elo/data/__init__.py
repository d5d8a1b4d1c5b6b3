"""Feed loading and name clean-up."""

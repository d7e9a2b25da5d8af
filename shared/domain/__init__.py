"""Domain value objects shared across apps."""

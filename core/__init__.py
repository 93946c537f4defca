"""Secret-guessing guard core."""

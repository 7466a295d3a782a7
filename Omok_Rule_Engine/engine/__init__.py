"""Rule engine: line generation, win/draw evaluation, move validation."""

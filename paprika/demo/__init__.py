"""Counter demo for the paprika navigator."""

"""agent-eval — runs coding agents against benchmark examples and aggregates judge scores."""

"""Domain layer: immutable coverage facts, ports and exceptions."""

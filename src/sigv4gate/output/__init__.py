"""Decision reporters — terminal and JSON."""

"""Core call types, encoding rules and dispatcher."""

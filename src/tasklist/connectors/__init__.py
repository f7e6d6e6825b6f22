"""Connectors: ways for a user to reach the command registry (console REPL)."""

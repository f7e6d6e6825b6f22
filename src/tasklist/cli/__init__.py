"""
Command layer.

Components:
- commands.py: CommandRegistry and the command handlers
- render.py: text rendering of project listings
- bootstrap.py: composition root (AppState)
- main.py: entrypoint
"""

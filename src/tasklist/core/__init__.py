"""
Core wiring shared by connectors.

Components:
- ports.py: Protocols (Clock, TaskRepo)
- clock.py: SystemClock
- state.py: AppState (settings + store + clock + lock)
"""

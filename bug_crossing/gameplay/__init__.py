"""
Gameplay core: grid, obstacles, player and session.
NO UI DEPENDENCIES.
"""

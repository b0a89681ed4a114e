"""
Combat system module for the battle core.

This module resolves single attacks (outcome, damage, experience) and runs
the speed-scheduled 1v1 battle loop between the player and an enemy.
"""

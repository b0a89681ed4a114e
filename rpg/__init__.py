"""
Battle core of the RPG.

This directory holds the packages of the game rules, imported by their bare
names: character progression, equipment and rings, status effects, and the
speed-driven battle engine.
"""

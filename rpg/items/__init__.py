"""
Items system module for the battle core.

This module contains the weapons and armors, the rings with their stat
factors and behaviours, and the recovery items used during battles.
"""

"""
Effects system module for the battle core.

This module contains the ring and equipment modifiers turning base stats into
effective stats, and the battle events reported to the event sink.
"""

"""Roster, settings and rotation models."""

from .player import InningAssignment, Player, Rotation, RotationSettings, Sport

__all__ = ["InningAssignment", "Player", "Rotation", "RotationSettings", "Sport"]

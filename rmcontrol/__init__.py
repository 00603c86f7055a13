"""Referee-system protocol, CRC checksums, client UI framing and HUD drawing for competition robots."""

__version__ = "0.1.0"
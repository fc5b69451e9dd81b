"""Utility helpers shared by the inverter modules."""

"""Microwave — a countdown control panel with cooking presets."""

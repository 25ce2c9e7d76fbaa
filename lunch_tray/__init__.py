"""Lunch Tray ordering flow."""

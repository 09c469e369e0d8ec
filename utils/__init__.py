"""Utility helpers for the league registration app."""

"""Utility helpers for lecturenotes."""

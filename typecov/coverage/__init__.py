"""Typing coverage snapshots and their text reports."""

"""Render documentation node trees as plain-text reports."""

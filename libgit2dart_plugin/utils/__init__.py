"""Utility helpers for libgit2dart_plugin."""

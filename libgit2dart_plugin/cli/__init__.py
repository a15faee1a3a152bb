"""CLI module for libgit2dart_plugin."""

"""
Entry point for running libgit2dart_plugin as a module: python -m libgit2dart_plugin
"""

from libgit2dart_plugin.cli.commands import app

if __name__ == "__main__":
    app()

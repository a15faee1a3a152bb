"""
libgit2dart-plugin - host side of the libgit2dart method channel.
"""

__version__ = "0.1.0"
__logo__ = "🐙"

CHANNEL_NAME = "libgit2dart"

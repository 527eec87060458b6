"""Text archiver based on a fixed variable-length prefix code."""

__version__ = "0.1.0"
__all__ = ["chunks", "decoding_tree", "vlc", "cli"]
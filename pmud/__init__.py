"""Multi-user dungeon server pieces: streaming hashes, a digest command, network helpers and user controllers."""

__version__ = "0.1.0"
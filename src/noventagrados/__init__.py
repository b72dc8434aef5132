"""noventagrados: rules engine and console for the Noventagrados board game."""

__version__ = "0.1.0"

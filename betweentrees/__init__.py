"""A small visual-novel engine built on pygame: dialogue, scripted events, actors and audio."""

__version__ = "0.1.0"
from .match import MatchScreen

__all__ = ["MatchScreen"]

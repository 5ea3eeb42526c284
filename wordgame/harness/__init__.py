from .core import GameSession, SessionState, play_session

__all__ = ["GameSession", "SessionState", "play_session"]

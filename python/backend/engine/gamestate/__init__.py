from backend.engine.gamestate.state import GameState, Mode, Snapshot

__all__ = ["GameState", "Mode", "Snapshot"]

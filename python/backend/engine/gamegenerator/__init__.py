from backend.engine.gamegenerator.generator import GameGenerator, GeneratorConfig

__all__ = ["GameGenerator", "GeneratorConfig"]

"""Programming drills: text patterns, array exercises, number puzzles and base conversions."""

__version__ = "0.1.0"
__all__ = ["arrays", "mathutils", "numbase", "patterns"]
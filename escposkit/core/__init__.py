from escposkit.core.binary import content, join, low_high, sequence

__all__ = ["content", "join", "low_high", "sequence"]

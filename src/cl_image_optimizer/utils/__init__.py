from .profiling import stopwatch, timed

__all__ = ["stopwatch", "timed"]

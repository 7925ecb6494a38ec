from ._time_performance import training_time_comparison


__all__ = [
    "training_time_comparison",
]

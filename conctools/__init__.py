"""Thread-based concurrency building blocks: atomics, semaphores, maps,
events, workers, throttles, timing, pools, pipelines and a toy scheduler."""

__version__ = "0.1.0"

__all__ = [
    "atomics",
    "events",
    "maps",
    "pipelines",
    "pool",
    "scheduler",
    "semaphores",
    "throttling",
    "timing",
    "workers",
]
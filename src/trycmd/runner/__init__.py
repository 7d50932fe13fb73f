"""Case registration and execution plan."""
from .runner import Runner
from .spec import RunnerSpec

__all__ = [
    "Runner",
    "RunnerSpec",
]

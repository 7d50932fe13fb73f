"""Executor interface exports."""
from .base import CaseExecutor, ExecutorManager, executor_manager

__all__ = [
    "CaseExecutor",
    "ExecutorManager",
    "executor_manager",
]

"""Application layer: runnable demonstrations of each pattern."""

from .demos import DemoDefinition, DemoResult, get_demo, list_demos, run_all, run_demo

__all__ = ["DemoDefinition", "DemoResult", "get_demo", "list_demos", "run_all", "run_demo"]

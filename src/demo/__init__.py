"""Cosmos DB getting-started demo over family documents."""

from demo.orchestrator import DemoContext, DemoReport, run_demo

__all__ = ["DemoContext", "DemoReport", "run_demo"]

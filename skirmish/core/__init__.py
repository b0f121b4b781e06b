"""Core building blocks shared by the battle simulation.

This package contains the pieces that do not know about combat rules:
- data: centralized enums
- events: publisher-subscriber event bus and event definitions
- errors: exception taxonomy
- config: simulation settings loaded from YAML
"""

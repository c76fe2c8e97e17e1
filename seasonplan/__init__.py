"""Season planner for community-dinner cooking teams.

Modules:
- config: load and validate planner configuration (YAML or JSON)
- domain: value types, SQLAlchemy models and repositories
- services: pure scheduling functions (calendar, affinity, roster, events)
- engine: scheduling stages, orchestrator and dinner-event generation
- io: CSV import/export
- validator: season and schedule validation
- cli: command-line interface entrypoints
"""

__all__ = [
    "config",
    "domain",
    "services",
    "engine",
    "io",
    "validator",
    "cli",
]

"""
Nearby & Fringe Suburb Finder
=============================
Hexagonal (Ports & Adapters) architecture.

Layer map
─────────────────────────────────────────────────────
  config/       Settings and user-facing message templates
  domain/       Pure business objects (models, exceptions), no I/O
  ports/        Abstract interfaces (Python Protocols)
  adapters/     Concrete implementations of each Port (JSON file, console)
  services/     Distance maths, index, search, ranking and the session loop;
                depends only on Ports, never Adapters
  interfaces/   Delivery layer: CLI
  tests/        Full test suite: unit / integration / e2e

Swapping an external collaborator (dataset source, terminal I/O):
  1. Write a new adapter in adapters/ implementing the relevant Port
  2. Change the wiring in services/container.py
"""
__version__ = "1.0.0"

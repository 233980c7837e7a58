#!/usr/bin/env python3
"""
CLI for the mutation pipeline.

Modes:
  1) plan - list the projects that would be mutated (and their test projects)
  2) run  - mutate them through a mutation engine

Usage:
  python mutation_cli.py --solution-path ./Acme.sln --base-path .
  python mutation_cli.py --mode plan --config mutation.yaml --out plan.json
  python mutation_cli.py --mode run --engine acme_mutator.engine:create --solution-path ./Acme.sln
"""

from __future__ import annotations

from cli.dispatch import main

if __name__ == "__main__":
    raise SystemExit(main())

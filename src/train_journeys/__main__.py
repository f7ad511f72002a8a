"""Allow running the CLI with ``python -m train_journeys``."""

from train_journeys.cli import main

main()

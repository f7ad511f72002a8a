"""Application services (use cases) for journey queries."""

from train_journeys.application.journey_planner import JourneyPlanner

__all__ = ["JourneyPlanner"]

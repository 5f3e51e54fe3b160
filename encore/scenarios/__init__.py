"""
Scenario Loading

Usage:
    from encore.scenarios import load_scenarios

    scenarios = load_scenarios(["smoke.yaml", "checkout.py"])
    for scenario in scenarios:
        print(scenario["name"])
"""

from .loader import ScenarioFileError, load_scenarios

__all__ = [
    "load_scenarios",
    "ScenarioFileError",
]

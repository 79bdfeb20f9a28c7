from roi_simulator.models.scenario import Scenario

__all__ = [
    "Scenario",
]

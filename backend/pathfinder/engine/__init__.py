"""Planning engines: timeline projection, income, growth, allocation, path comparison, career advice."""
from pathfinder.engine.advisor import recommend, score_path
from pathfinder.engine.allocation import calculate_allocations
from pathfinder.engine.career import simulate_career_path
from pathfinder.engine.growth import calculate_projections, future_value
from pathfinder.engine.income import calculate_net_income
from pathfinder.engine.opportunity_cost import compare_paths
from pathfinder.engine.timeline import run_projection

__all__ = [
    "recommend",
    "score_path",
    "calculate_allocations",
    "simulate_career_path",
    "calculate_projections",
    "future_value",
    "calculate_net_income",
    "compare_paths",
    "run_projection",
]

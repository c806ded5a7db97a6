"""
Construction of AbstractGoal objects from decoded parameters.
"""

from typing import TYPE_CHECKING

from .goals import REGISTRY
from .goals.schema import GoalDefinition
from .models import AbstractGoal, GoalParams, ParamValue

if TYPE_CHECKING:
    from .game_data import GameDataService

PLACEHOLDER = "BingoChallenge"


def format_value(value: ParamValue) -> str:
    """String form of a parameter as shown in a goal's values."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return "|".join(str(v) for v in value)
    return str(value)


def build_goal(
    definition: GoalDefinition,
    params: GoalParams,
    data: "GameDataService",
    error: str = "",
) -> AbstractGoal:
    """Run a definition's generators over ``params``.

    ``params`` must already hold every parameter of the definition.
    """
    labels = definition.item_labels()
    return AbstractGoal(
        name=definition.goal_name,
        category=definition.category,
        items=[label for label, _ in labels],
        values=[format_value(params[param]) for _, param in labels],
        description=definition.describe(params, data),
        comments=definition.comment(params, data),
        paint=definition.paint(params, data),
        error=error,
        params=dict(params),
    )


def placeholder_goal(message: str, data: "GameDataService") -> AbstractGoal:
    """Empty challenge standing in for a goal that failed to decode."""
    return build_goal(
        REGISTRY.get(PLACEHOLDER),
        {"desc": f"Error: {message}"},
        data,
        error=message,
    )


def merged_params(definition: GoalDefinition, params: GoalParams) -> GoalParams:
    """Definition defaults overlaid with ``params``."""
    merged: GoalParams = {}
    for name, default in definition.params.items():
        value = params.get(name, default)
        merged[name] = list(value) if isinstance(value, (list, tuple)) else value
    return merged

"""Preset controls offered to users: defaults, common equations, sample data."""

from graphplot.controls import EQUATION_KINDS, GraphControls, GraphKind

DEFAULT_CONTROLS = GraphControls(
    type=GraphKind.LINE,
    equation="sin(x)",
    data="10, 20, 30, 40, 50",
    x_min=-10.0,
    x_max=10.0,
    step=0.1,
)

COMMON_EQUATIONS = [
    "sin(x)",
    "cos(x)",
    "tan(x)",
    "x^2",
    "x^3",
    "log(x)",
    "exp(x)",
    "1/x",
    "sqrt(x)",
    "abs(x)",
    "floor(x)",
    "ceil(x)",
]

SAMPLE_DATA = [
    "10, 20, 30, 40, 50",
    "15, 25, 10, 35, 20",
    "100, 200, 150, 300, 250",
    "5, 15, 10, 20, 25",
]


def get_presets() -> dict:
    """All presets as a JSON-ready dictionary."""
    return {
        "default_controls": DEFAULT_CONTROLS.model_dump(mode="json", by_alias=True),
        "common_equations": list(COMMON_EQUATIONS),
        "sample_data": list(SAMPLE_DATA),
        "equation_kinds": sorted(kind.value for kind in EQUATION_KINDS),
    }

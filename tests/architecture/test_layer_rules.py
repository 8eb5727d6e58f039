"""
Layer Rules.

Permanent tests enforcing dependency direction between layers:
- Domain must not access Rules, Application or Infrastructure
- Rules must not access Application or Infrastructure
- Application must not access Infrastructure

These rules use PyTestArch's LayerRule API for declarative enforcement.
"""

import pytest
from pytestarch import LayerRule


@pytest.mark.parametrize(
    ("layer", "forbidden"),
    [
        ("domain", "rules"),
        ("domain", "application"),
        ("domain", "infrastructure"),
        ("rules", "application"),
        ("rules", "infrastructure"),
        ("application", "infrastructure"),
    ],
)
def test_layer_does_not_access(evaluable, layers, layer, forbidden):
    """Dependencies point inward, towards the domain."""
    rule = (
        LayerRule()
        .based_on(layers)
        .layers_that()
        .are_named(layer)
        .should_not()
        .access_layers_that()
        .are_named(forbidden)
    )
    rule.assert_applies(evaluable)

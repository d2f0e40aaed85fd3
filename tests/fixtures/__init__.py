"""Test fixtures for provider and loop testing."""

from .state_fixtures import make_bulb_state, make_light_state_dict, make_response, make_state_dict

__all__ = [
    "make_bulb_state",
    "make_light_state_dict",
    "make_response",
    "make_state_dict",
]

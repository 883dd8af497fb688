"""Helpers for collaborators that store or export engine output."""

from .serialization import (
    projection_to_dict,
    request_from_dict,
    request_to_dict,
    result_to_dict,
    scenarios_to_dict,
)

__all__ = [
    "projection_to_dict",
    "request_from_dict",
    "request_to_dict",
    "result_to_dict",
    "scenarios_to_dict",
]

"""Primitive interactions: one browser action or one HTTP request each."""

from pipelinecraft.screenplay.interactions.api_request import ApiRequest
from pipelinecraft.screenplay.interactions.click import Click
from pipelinecraft.screenplay.interactions.fill import Fill
from pipelinecraft.screenplay.interactions.navigate import Navigate
from pipelinecraft.screenplay.interactions.wait import FixedDelay, UntilElement, Wait

__all__ = [
    "ApiRequest",
    "Click",
    "Fill",
    "Navigate",
    "Wait",
    "UntilElement",
    "FixedDelay",
]

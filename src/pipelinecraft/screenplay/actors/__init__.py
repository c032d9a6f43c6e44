"""Actors and the Task/Question contracts they drive."""

from pipelinecraft.screenplay.actors.api_user import ApiUser
from pipelinecraft.screenplay.actors.base import Actor, Question, Task
from pipelinecraft.screenplay.actors.shopper import CheckoutInfo, Shopper

__all__ = [
    "Actor",
    "Task",
    "Question",
    "Shopper",
    "CheckoutInfo",
    "ApiUser",
]

from .greeting import GreetingPayload

__all__ = ["GreetingPayload"]

"""
Server responses for Cards Tour.

A ServerResponse is exactly one of Result, Owner or Failure. Each variant is a
frozen dataclass carrying its own payload, and `match` hands that payload to
the callback registered for the variant.
"""

from dataclasses import astuple, dataclass
from typing import Callable, TypeVar

T = TypeVar('T')


class ServerResponse:
    """Base of the three response variants."""

    tag = ''

    def match(self, on_result: Callable[[str, str], T], on_owner: Callable[[str], T],
              on_failure: Callable[[str], T]) -> T:
        """Call the callback for this variant with its payload fields."""
        handlers = {'result': on_result, 'owner': on_owner, 'failure': on_failure}
        return handlers[self.tag](*astuple(self))


@dataclass(frozen=True)
class Result(ServerResponse):
    """Requested sunrise and sunset times."""
    tag = 'result'
    sunrise: str
    sunset: str


@dataclass(frozen=True)
class Owner(ServerResponse):
    """Name of the server owner."""
    tag = 'owner'
    name: str


@dataclass(frozen=True)
class Failure(ServerResponse):
    """Description of what went wrong."""
    tag = 'failure'
    message: str


def make_result(sunrise: str, sunset: str) -> Result:
    return Result(sunrise, sunset)


def make_owner(name: str) -> Owner:
    return Owner(name)


def make_failure(message: str) -> Failure:
    return Failure(message)


def describe_response(response: ServerResponse) -> str:
    """Format the message for a server response."""
    if not isinstance(response, (Result, Owner, Failure)):
        raise TypeError(f"Not a server response: {response!r}")

    return response.match(
        lambda sunrise, sunset: f"Sunrise is at {sunrise} and sunset is at {sunset}.",
        lambda name: f"Server owner name is {name}",
        lambda message: f"Failure...  {message}",
    )

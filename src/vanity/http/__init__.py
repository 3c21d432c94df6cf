"""HTTP primitives — immutable Request, Response, and Redirect."""

from vanity.http.request import Request
from vanity.http.response import Redirect, Response

__all__ = ["Redirect", "Request", "Response"]

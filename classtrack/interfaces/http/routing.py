# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Action dispatch for ``/api/<resource>?action=<name>`` style endpoints."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from flask import Blueprint, request

from classtrack.shared.errors import MethodNotAllowedError, UnknownActionError

Handler = Callable[[], Any]


@dataclass(slots=True)
class ActionRouter:
    """Route table keyed by ``(HTTP method, action)``.

    Unknown actions are rejected here instead of falling through to an empty
    response: 404 for an unknown action on a method the resource serves, 405
    for a method it does not serve at all.
    """

    name: str
    path: str
    _routes: dict[tuple[str, str], Handler] = field(default_factory=dict, init=False)

    def add(self, method: str, action: str, handler: Handler) -> ActionRouter:
        key = (method.upper(), action)
        if key in self._routes:
            raise ValueError(f"duplicate action route {key} on {self.path}")
        self._routes[key] = handler
        return self

    def get(self, action: str, handler: Handler) -> ActionRouter:
        return self.add("GET", action, handler)

    def post(self, action: str, handler: Handler) -> ActionRouter:
        return self.add("POST", action, handler)

    def put(self, action: str, handler: Handler) -> ActionRouter:
        return self.add("PUT", action, handler)

    def delete(self, action: str, handler: Handler) -> ActionRouter:
        return self.add("DELETE", action, handler)

    @property
    def methods(self) -> list[str]:
        return sorted({method for method, _ in self._routes})

    def actions(self, method: str) -> Iterable[str]:
        return sorted(action for m, action in self._routes if m == method.upper())

    def resolve(self, method: str, action: str) -> Handler:
        handler = self._routes.get((method.upper(), action))
        if handler is not None:
            return handler
        if method.upper() not in self.methods:
            raise MethodNotAllowedError(method.upper())
        raise UnknownActionError(action)

    def dispatch(self) -> Any:
        action = request.args.get("action", "")
        return self.resolve(request.method, action)()

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint(self.name, __name__)
        # Every verb reaches dispatch() so unsupported ones get the JSON 405.
        bp.add_url_rule(
            self.path,
            endpoint="dispatch",
            view_func=self.dispatch,
            methods=["GET", "POST", "PUT", "DELETE", "PATCH"],
        )
        return bp

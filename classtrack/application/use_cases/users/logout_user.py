"""Use-case for revoking every token a user holds."""

from __future__ import annotations

from classtrack.domain.users.repositories import SessionTokenRepository


class LogoutUserUseCase:
    def __init__(self, *, tokens: SessionTokenRepository) -> None:
        self._tokens = tokens

    def execute(self, user_id: int | None) -> int:
        """Return how many session tokens were revoked; 0 for anonymous callers."""
        if user_id is None:
            return 0
        return self._tokens.revoke_all_for_user(user_id)

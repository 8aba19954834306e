"""
Async HTTP client for the users/posts API.
"""

from typing import Any, Optional

import httpx

from userposts.config import API_BASE_URL, DEFAULT_LIMIT


class ApiClientError(Exception):
    """Raised when the API answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class UsersApiClient:
    def __init__(
        self,
        base_url: str = API_BASE_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, transport=transport)

    async def __aenter__(self) -> "UsersApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    @staticmethod
    def _json_or_raise(response: httpx.Response, message: str) -> Any:
        if not response.is_success:
            raise ApiClientError(message, response.status_code)
        return response.json()

    async def fetch_users(self, page: int, limit: int = DEFAULT_LIMIT) -> Any:
        response = await self._client.get(
            "/users", params={"page": page, "limit": limit}
        )
        return self._json_or_raise(response, "Failed to fetch users")

    async def fetch_user_details(self, user_id: int) -> Any:
        response = await self._client.get(f"/user/{user_id}")
        return self._json_or_raise(response, "Failed to fetch user details")

    async def create_user(
        self, name: str, email: str, address: str, post_content: str
    ) -> Any:
        response = await self._client.post(
            "/user",
            json={
                "name": name,
                "email": email,
                "address": address,
                "postContent": post_content,
            },
        )
        return self._json_or_raise(response, "Failed to create user")

    async def delete_post(self, post_id: int) -> Any:
        response = await self._client.delete(f"/post/{post_id}")
        return self._json_or_raise(response, "Failed to delete the post")

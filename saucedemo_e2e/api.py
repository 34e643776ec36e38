"""JSONPlaceholder client and REST contract checks."""

import logging
import random
import string
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from .errors import ContractViolation, TransportError
from .models import NewPost, Post

logger = logging.getLogger(__name__)

POST_FIELDS: dict[str, type] = {
    "userId": int,
    "id": int,
    "title": str,
    "body": str,
}


class JsonPlaceholderClient:
    """Client for the JSONPlaceholder ``/posts`` resource."""

    BASE_URL = "https://jsonplaceholder.typicode.com"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: API root (defaults to the public JSONPlaceholder)
            timeout: Request timeout in seconds
            transport: Custom httpx transport, e.g. ``httpx.MockTransport``
        """
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    def _request(self, method: str, path: str, json: Optional[dict] = None) -> httpx.Response:
        response = self.client.request(method, path, json=json)
        logger.info(f"{method} {path}: status={response.status_code}")
        if not response.is_success:
            raise TransportError(method, str(response.request.url), response.status_code)
        return response

    def list_posts(self) -> httpx.Response:
        return self._request("GET", "/posts")

    def create_post(self, post: NewPost) -> httpx.Response:
        return self._request("POST", "/posts", json=post.model_dump(by_alias=True))

    def update_post(self, post_id: int, post: NewPost) -> httpx.Response:
        payload = {"id": post_id, **post.model_dump(by_alias=True, exclude={"id"})}
        return self._request("PUT", f"/posts/{post_id}", json=payload)

    def delete_post(self, post_id: int) -> httpx.Response:
        return self._request("DELETE", f"/posts/{post_id}")

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "JsonPlaceholderClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def _expect_status(endpoint: str, response: httpx.Response, status: int) -> None:
    if response.status_code != status:
        raise ContractViolation(endpoint, "status", status, response.status_code)


def _expect_shape(endpoint: str, payload: Any, fields: dict[str, type]) -> None:
    if not isinstance(payload, dict):
        raise ContractViolation(endpoint, "<body>", "object", type(payload).__name__)
    for name, kind in fields.items():
        if name not in payload:
            raise ContractViolation(endpoint, name, kind.__name__, "<missing>")
        value = payload[name]
        # bool is an int subclass; a JSON true is not an identifier
        if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
            raise ContractViolation(endpoint, name, kind.__name__, type(value).__name__)


def _expect_values(endpoint: str, payload: dict, expected: dict[str, Any]) -> None:
    for name, value in expected.items():
        if payload.get(name) != value:
            raise ContractViolation(endpoint, name, value, payload.get(name, "<missing>"))


def _validate_post(endpoint: str, payload: dict) -> Post:
    try:
        return Post.model_validate(payload)
    except ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or "<body>"
        raise ContractViolation(endpoint, field, error["type"], error.get("input")) from e


def check_list_posts(client: JsonPlaceholderClient) -> list[Post]:
    """
    GET /posts returns 200 with a non-empty list of posts.

    Returns:
        The posts, every item checked against the post shape
    """
    endpoint = "GET /posts"
    response = client.list_posts()
    _expect_status(endpoint, response, 200)

    posts = response.json()
    if not isinstance(posts, list) or not posts:
        raise ContractViolation(endpoint, "<body>", "non-empty list", posts)

    for item in posts:
        _expect_shape(endpoint, item, POST_FIELDS)
    return [_validate_post(endpoint, item) for item in posts]


def check_create_post(client: JsonPlaceholderClient, post: NewPost) -> Post:
    """POST /posts returns 201 echoing the submitted fields plus a generated id."""
    endpoint = "POST /posts"
    response = client.create_post(post)
    _expect_status(endpoint, response, 201)

    created = response.json()
    _expect_shape(endpoint, created, POST_FIELDS)
    _expect_values(endpoint, created, post.model_dump(by_alias=True, exclude={"id"}))

    logger.info(f"Created Post: {created}")
    return _validate_post(endpoint, created)


def check_update_post(client: JsonPlaceholderClient, post: NewPost, post_id: int = 1) -> Post:
    """PUT /posts/{id} returns 200 echoing exactly the submitted update."""
    endpoint = f"PUT /posts/{post_id}"
    response = client.update_post(post_id, post)
    _expect_status(endpoint, response, 200)

    updated = response.json()
    _expect_shape(endpoint, updated, POST_FIELDS)
    _expect_values(endpoint, updated, {"id": post_id, **post.model_dump(by_alias=True, exclude={"id"})})

    logger.info(f"Updated Post: {updated}")
    return _validate_post(endpoint, updated)


def check_delete_post(client: JsonPlaceholderClient, post_id: int = 1) -> None:
    """DELETE /posts/{id} returns 200 with an empty JSON object."""
    endpoint = f"DELETE /posts/{post_id}"
    response = client.delete_post(post_id)
    _expect_status(endpoint, response, 200)

    body = response.json()
    if body != {}:
        raise ContractViolation(endpoint, "<body>", {}, body)


def random_string(length: int = 10, rng: Optional[random.Random] = None) -> str:
    rng = rng or random.Random()
    return "".join(rng.choices(string.ascii_lowercase + string.digits, k=length))


def random_number(minimum: int = 1, maximum: int = 10, rng: Optional[random.Random] = None) -> int:
    rng = rng or random.Random()
    return rng.randint(minimum, maximum)


def make_post(rng: Optional[random.Random] = None, prefix: str = "Random") -> NewPost:
    """Random post payload; ``prefix`` is "Random" for creates and "Updated" for updates."""
    rng = rng or random.Random()
    return NewPost(
        title=f"{prefix} Title {random_string(rng=rng)}",
        body=f"{prefix} Body Content {random_string(20, rng=rng)}",
        user_id=random_number(rng=rng),
    )

from collections.abc import Callable
from typing import Any

import pytest

UserPayloadFactory = Callable[[int, str, str], dict[str, Any]]


def _user_payload(user_id: int, first_name: str, last_name: str) -> dict[str, Any]:
    return {
        "data": {
            "id": user_id,
            "email": f"{first_name.lower()}.{last_name.lower()}@reqres.in",
            "first_name": first_name,
            "last_name": last_name,
            "avatar": f"https://reqres.in/img/faces/{user_id}-image.jpg",
        },
        "support": {
            "url": "https://reqres.in/#support-heading",
            "text": "To keep ReqRes free, contributions towards server costs are appreciated!",
        },
    }


@pytest.fixture
def users_base_url() -> str:
    return "https://users.test"


@pytest.fixture
def user_payload() -> dict[str, Any]:
    """Sample user service envelope for user 2."""
    return _user_payload(2, "Janet", "Weaver")


@pytest.fixture
def user_payload_factory() -> UserPayloadFactory:
    """Build user envelopes for arbitrary ids."""
    return _user_payload

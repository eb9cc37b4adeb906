"""Tests for the fetch_user job."""

from typing import Any
from unittest.mock import AsyncMock, patch

import httpx
import respx

from umai.jobs.fetch_user import main, run_fetch


class TestRunFetch:
    @respx.mock
    async def test_success(self, user_payload: dict[str, Any]) -> None:
        respx.get("https://reqres.in/api/users/2").mock(
            return_value=httpx.Response(200, json=user_payload)
        )

        assert await run_fetch() is True

    @respx.mock
    async def test_failure(self) -> None:
        respx.get("https://reqres.in/api/users/99").mock(return_value=httpx.Response(404))

        assert await run_fetch(99) is False


class TestMain:
    def test_passes_user_id(self) -> None:
        with patch("umai.jobs.fetch_user.run_fetch", new_callable=AsyncMock) as run:
            run.return_value = True
            assert main(["--id", "5"]) == 0
            run.assert_awaited_once_with(5)

    def test_exit_code_on_failure(self) -> None:
        with patch("umai.jobs.fetch_user.run_fetch", new_callable=AsyncMock) as run:
            run.return_value = False
            assert main([]) == 1

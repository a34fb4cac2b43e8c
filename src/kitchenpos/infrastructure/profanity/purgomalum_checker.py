"""ProfanityChecker backed by the PurgoMalum web service.

PurgoMalum answers ``GET /service/containsprofanity?text=...`` with a
plain-text ``true`` or ``false``.  Anything else (transport errors, non-2xx
status, an unexpected body) raises ProfanityCheckError, so a failed check
never lets a name through.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from kitchenpos.domain.exceptions import ProfanityCheckError
from kitchenpos.domain.service.profanity_checker import ProfanityChecker

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger(__name__)


class PurgomalumProfanityChecker(ProfanityChecker):

    def __init__(
        self,
        base_url: str = "https://www.purgomalum.com",
        timeout_seconds: float = 5.0,
        client: httpx.Client | None = None,
    ) -> None:
        self._client = client or httpx.Client(
            base_url=base_url, timeout=timeout_seconds
        )

    def contains_profanity(self, text: str) -> bool:
        try:
            response = self._client.get(
                "/service/containsprofanity", params={"text": text}
            )
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise ProfanityCheckError("Profanity check timed out") from exc
        except httpx.HTTPStatusError as exc:
            raise ProfanityCheckError(
                f"Profanity check failed with status {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise ProfanityCheckError(f"Profanity check failed: {exc}") from exc

        answer = response.text.strip().lower()
        if answer not in ("true", "false"):
            raise ProfanityCheckError(
                f"Unexpected profanity check response: {response.text!r}"
            )
        logger.debug("Profanity check for %r: %s", text, answer)
        return answer == "true"

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> PurgomalumProfanityChecker:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

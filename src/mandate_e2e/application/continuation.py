"""Short-circuit flag that stops a scenario group after an expected failure."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Mapping, Optional, Union

from ..connectors.models import ExpectedResponse
from ..connectors.utils import should_continue_further

logger = logging.getLogger(__name__)


class ContinuationGate:
    """Per-group continuation flag.

    Steps run only while ``should_continue`` is true. A step that validates a
    response wraps its call test in ``validating``; once the expected response
    reports an error the flag drops and every later step of the group is
    skipped.
    """

    def __init__(self, name: Optional[str] = None) -> None:
        self.name = name
        self.should_continue = True

    @property
    def halted(self) -> bool:
        return not self.should_continue

    def halt(self) -> None:
        if self.should_continue:
            logger.warning("Scenario %s halted; remaining steps will be skipped", self.name)
        self.should_continue = False

    def update(self, response_data: Union[ExpectedResponse, Mapping[str, Any]]) -> bool:
        """Fold the predicate for ``response_data`` into the flag and return it."""
        if self.should_continue and not should_continue_further(response_data):
            self.halt()
        return self.should_continue

    @contextmanager
    def validating(
        self, response_data: Union[ExpectedResponse, Mapping[str, Any]]
    ) -> Iterator["ContinuationGate"]:
        """Update the flag when the wrapped step ends, whether it passed or failed."""
        try:
            yield self
        finally:
            self.update(response_data)

    def __repr__(self) -> str:
        return f"ContinuationGate(name={self.name!r}, should_continue={self.should_continue})"

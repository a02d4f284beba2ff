"""Errors raised while assigning product slugs.

Transliteration failures and empty normalization results are not errors:
the assigner degrades to the raw name or to a fallback slug instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.storefront.core.services.slug.assigner import BackfillReport


class SlugError(Exception):
    """Base class for slug assignment failures."""


class UniquenessExhaustedError(SlugError):
    """No free candidate was found within the configured number of attempts."""

    def __init__(self, base: str, attempts: int) -> None:
        super().__init__(f"No unique slug for base '{base}' after {attempts} attempts")
        self.base = base
        self.attempts = attempts


class PersistenceError(SlugError):
    """The store failed to persist a slug for one product."""


class PersistenceConflictError(PersistenceError):
    """The store rejected a write because another product already holds the slug."""

    def __init__(self, slug: str, product_id: str | None = None) -> None:
        super().__init__(f"Slug '{slug}' is already taken")
        self.slug = slug
        self.product_id = product_id


class StoreUnavailableError(SlugError):
    """The product store cannot be reached; no further progress is possible."""


class BackfillAbortedError(StoreUnavailableError):
    """A backfill run stopped because the store became unavailable.

    `report` holds what was completed before the failure.
    """

    def __init__(self, report: BackfillReport) -> None:
        super().__init__(
            f"Backfill aborted after {report.processed} products: store unavailable"
        )
        self.report = report

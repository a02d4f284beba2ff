"""Product slug assignment: single products at creation time and batch backfill."""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TypeVar

from loguru import logger

from src.storefront.core.services.slug.errors import (
    BackfillAbortedError,
    PersistenceConflictError,
    SlugError,
    StoreUnavailableError,
)
from src.storefront.core.services.slug.normalizer import fallback_candidate, normalize
from src.storefront.core.services.slug.resolver import UniquenessResolver
from src.storefront.core.services.slug.store import ProductStore
from src.storefront.core.services.slug.transliterator import (
    PinyinTransliterator,
    Transliterator,
)
from src.storefront.runtime.config.config_data import SlugConfig

T = TypeVar("T")


@dataclass
class BackfillFailure:
    product_id: str
    name: str
    error: str


@dataclass
class BackfillReport:
    """Outcome of one backfill run."""

    processed: int = 0
    skipped: int = 0
    failures: list[BackfillFailure] = field(default_factory=list)
    stopped: bool = False


class SlugAssigner:
    """Assign URL-safe, globally unique slugs to products.

    The pipeline is transliterate -> normalize -> resolve uniqueness. A
    caller-supplied slug skips transliteration and is only normalized and
    made unique.
    """

    def __init__(
        self,
        store: ProductStore,
        transliterator: Transliterator | None = None,
        config: SlugConfig | None = None,
    ) -> None:
        self._store = store
        self._transliterator = transliterator or PinyinTransliterator()
        self._config = config or SlugConfig()
        self._resolver = UniquenessResolver(store, self._config.max_attempts)

    def base_slug(self, name: str, preferred_slug: str | None = None) -> str:
        """Normalized candidate before uniqueness is applied; may be empty."""
        if preferred_slug and preferred_slug.strip():
            return normalize(preferred_slug)

        lowered = name.strip().lower()
        try:
            tokens: str | list[str] = self._transliterator.transliterate(lowered)
        except Exception as exc:
            logger.warning(
                "Transliteration failed for '{}', using original name: {}", name, exc
            )
            tokens = lowered
        return normalize(tokens)

    def assign_slug_for_name(
        self,
        name: str,
        preferred_slug: str | None = None,
        *,
        product_id: str | None = None,
    ) -> str:
        """Return the slug to persist for a product; does not write anything.

        `product_id` is the product being assigned. It feeds the fallback slug
        and is excluded from the conflict check so recomputing a product's
        own slug returns the same value.
        """
        base = self.base_slug(name, preferred_slug)
        if not base:
            base = fallback_candidate(
                product_id,
                name=name,
                prefix=self._config.fallback_prefix,
                length=self._config.fallback_suffix_length,
            )
            logger.info("Name '{}' produced an empty slug; falling back to '{}'", name, base)
        return self._resolver.resolve(base, exclude_id=product_id)

    def persist_with_retry(
        self,
        name: str,
        preferred_slug: str | None,
        *,
        product_id: str | None,
        write: Callable[[str], T],
    ) -> T:
        """Compute a slug and hand it to `write`, retrying once on a conflict.

        A conflict means another writer claimed the candidate between our
        check and our write. The slug is recomputed against the new state
        and written one more time; a second conflict propagates.
        """
        slug = self.assign_slug_for_name(name, preferred_slug, product_id=product_id)
        try:
            return write(slug)
        except PersistenceConflictError:
            logger.warning("Slug '{}' was claimed concurrently; retrying once", slug)

        slug = self.assign_slug_for_name(name, preferred_slug, product_id=product_id)
        return write(slug)

    def backfill_all_missing_slugs(
        self, stop_event: threading.Event | None = None
    ) -> BackfillReport:
        """Give every product without a slug one derived from its name.

        Products are handled one at a time in store order and each slug is
        persisted before the next product is resolved. A failure on one
        product is recorded and the run continues; an unavailable store
        aborts the run with BackfillAbortedError carrying the partial report.
        Setting `stop_event` stops the run between two products.
        """
        report = BackfillReport()
        try:
            candidates = self._store.list_with_missing_slug()
        except StoreUnavailableError as exc:
            raise BackfillAbortedError(report) from exc

        logger.info("Found {} products needing slug generation", len(candidates))

        for candidate in candidates:
            if stop_event is not None and stop_event.is_set():
                report.stopped = True
                logger.info("Backfill stop requested; leaving remaining products")
                break

            try:
                slug = self.persist_with_retry(
                    candidate.name,
                    None,
                    product_id=candidate.id,
                    write=lambda s, pid=candidate.id: self._assign(pid, s),
                )
            except StoreUnavailableError as exc:
                logger.error("Store unavailable during backfill: {}", exc)
                raise BackfillAbortedError(report) from exc
            except SlugError as exc:
                report.skipped += 1
                report.failures.append(
                    BackfillFailure(product_id=candidate.id, name=candidate.name, error=str(exc))
                )
                logger.error(
                    "Could not assign slug to product {} ('{}'): {}",
                    candidate.id,
                    candidate.name,
                    exc,
                )
                continue

            report.processed += 1
            logger.info("Updating '{}' -> slug: '{}'", candidate.name, slug)

        logger.info(
            "Backfill finished: {} processed, {} skipped",
            report.processed,
            report.skipped,
        )
        return report

    def _assign(self, product_id: str, slug: str) -> str:
        self._store.assign_slug(product_id, slug)
        return slug

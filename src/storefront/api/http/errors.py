"""Translation of domain errors into HTTP responses."""

from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import HTTPException
from loguru import logger

from src.storefront.core.services.catalog import (
    ChannelInUseError,
    DuplicateNameError,
    NotFoundError,
)
from src.storefront.core.services.slug import (
    PersistenceConflictError,
    StoreUnavailableError,
    UniquenessExhaustedError,
)

SLUG_CONFLICT_DETAIL = "Could not assign a unique identifier, please retry"


@contextmanager
def http_errors() -> Iterator[None]:
    """Re-raise known domain errors as `HTTPException` with a matching status."""
    try:
        yield
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except (DuplicateNameError, ChannelInUseError) as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except StoreUnavailableError as e:
        raise HTTPException(status_code=503, detail="Storage temporarily unavailable") from e
    except (PersistenceConflictError, UniquenessExhaustedError) as e:
        logger.warning("Slug assignment failed: {}", e)
        raise HTTPException(status_code=409, detail=SLUG_CONFLICT_DETAIL) from e

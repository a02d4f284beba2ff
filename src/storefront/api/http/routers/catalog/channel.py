"""Channel API router."""

from fastapi import APIRouter, Depends

from src.storefront.api.http.deps import get_channel_service
from src.storefront.api.http.errors import http_errors
from src.storefront.core.services.catalog import ChannelService
from src.storefront.entities.catalog.channel import (
    Channel,
    ChannelWithCount,
    ChannelWrite,
)

router = APIRouter(prefix="/api/channels", tags=["channels"])


@router.get("", response_model=list[ChannelWithCount])
def list_channels(
    service: ChannelService = Depends(get_channel_service),
) -> list[ChannelWithCount]:
    """List channels in creation order with their product counts."""
    return service.list_channels()


@router.post("", response_model=Channel, status_code=201)
def create_channel(
    payload: ChannelWrite,
    service: ChannelService = Depends(get_channel_service),
) -> Channel:
    with http_errors():
        return service.create_channel(payload)


@router.put("/{channel_id}", response_model=Channel)
def update_channel(
    channel_id: str,
    payload: ChannelWrite,
    service: ChannelService = Depends(get_channel_service),
) -> Channel:
    with http_errors():
        return service.update_channel(channel_id, payload)


@router.delete("/{channel_id}")
def delete_channel(
    channel_id: str,
    service: ChannelService = Depends(get_channel_service),
) -> dict[str, str]:
    """Delete a channel; refused while products still use it."""
    with http_errors():
        service.delete_channel(channel_id)
    return {"message": "Channel deleted successfully"}

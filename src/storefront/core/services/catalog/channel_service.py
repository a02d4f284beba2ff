"""Channel management."""

from loguru import logger
from sqlmodel import Session

from src.storefront.core.services.catalog.errors import (
    ChannelInUseError,
    DuplicateNameError,
    NotFoundError,
)
from src.storefront.entities.catalog.channel import (
    Channel,
    ChannelRepository,
    ChannelWithCount,
    ChannelWrite,
)
from src.storefront.entities.catalog.product import ProductRepository


class ChannelService:
    def __init__(self, session: Session) -> None:
        self._session = session
        self._channels = ChannelRepository(session)
        self._products = ProductRepository(session)

    def list_channels(self) -> list[ChannelWithCount]:
        return self._channels.list_with_counts()

    def create_channel(self, payload: ChannelWrite) -> Channel:
        if self._channels.get_by_name(payload.name) is not None:
            raise DuplicateNameError("Channel", payload.name)
        channel = self._channels.create(Channel(name=payload.name, color=payload.color))
        self._session.commit()
        logger.info("Created channel '{}'", channel.name)
        return channel

    def update_channel(self, channel_id: str, payload: ChannelWrite) -> Channel:
        current = self._channels.get(channel_id)
        if current is None:
            raise NotFoundError("Channel", channel_id)
        holder = self._channels.get_by_name(payload.name)
        if holder is not None and holder.id != channel_id:
            raise DuplicateNameError("Channel", payload.name)
        channel = self._channels.update(
            current.model_copy(update={"name": payload.name, "color": payload.color})
        )
        self._session.commit()
        return channel

    def delete_channel(self, channel_id: str) -> None:
        """Delete a channel that no product references.

        Raises:
            NotFoundError: If the channel does not exist
            ChannelInUseError: If products still belong to the channel
        """
        if self._channels.get(channel_id) is None:
            raise NotFoundError("Channel", channel_id)
        in_use = self._products.count_by_channel(channel_id)
        if in_use:
            raise ChannelInUseError(channel_id, in_use)
        self._channels.delete(channel_id)
        self._session.commit()
        logger.info("Deleted channel {}", channel_id)

"""Channel repository."""

from sqlalchemy import func
from sqlmodel import Session, col, select

from src.storefront.entities.catalog.channel.entity import Channel, ChannelWithCount
from src.storefront.entities.catalog.channel.table import ChannelTable
from src.storefront.entities.catalog.product.table import ProductTable


class ChannelRepository:
    """Data-access layer for channels."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def create(self, channel: Channel) -> Channel:
        row = ChannelTable.model_validate(channel.model_dump())
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Channel.model_validate(row, from_attributes=True)

    def get(self, channel_id: str) -> Channel | None:
        row = self._session.get(ChannelTable, channel_id)
        if row is None:
            return None
        return Channel.model_validate(row, from_attributes=True)

    def get_by_name(self, name: str) -> Channel | None:
        row = self._session.exec(select(ChannelTable).where(ChannelTable.name == name)).first()
        if row is None:
            return None
        return Channel.model_validate(row, from_attributes=True)

    def update(self, channel: Channel) -> Channel:
        row = self._session.get(ChannelTable, channel.id)
        if row is None:
            raise ValueError(f"Channel {channel.id} not found")
        row.name = channel.name
        row.color = channel.color
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Channel.model_validate(row, from_attributes=True)

    def delete(self, channel_id: str) -> bool:
        row = self._session.get(ChannelTable, channel_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True

    def list_with_counts(self) -> list[ChannelWithCount]:
        """All channels in creation order with the number of products using each."""
        statement = (
            select(ChannelTable, func.count(col(ProductTable.id)))
            .outerjoin(ProductTable, col(ProductTable.channel_id) == ChannelTable.id)
            .group_by(col(ChannelTable.id))
            .order_by(col(ChannelTable.created_at))
        )
        return [
            ChannelWithCount.model_validate({**row.model_dump(), "product_count": count})
            for row, count in self._session.exec(statement).all()
        ]

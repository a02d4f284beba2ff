"""Entity package: Channel."""

from .entity import Channel, ChannelWithCount, ChannelWrite
from .repository import ChannelRepository
from .table import ChannelTable

__all__ = ["Channel", "ChannelRepository", "ChannelTable", "ChannelWithCount", "ChannelWrite"]

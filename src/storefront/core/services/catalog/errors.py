"""Errors raised by catalog services and mapped to HTTP responses by the routers."""


class CatalogError(Exception):
    """Base class for catalog rule violations."""


class NotFoundError(CatalogError):
    def __init__(self, kind: str, key: str) -> None:
        super().__init__(f"{kind} not found")
        self.kind = kind
        self.key = key


class DuplicateNameError(CatalogError):
    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"{kind} '{name}' already exists")
        self.kind = kind
        self.name = name


class ChannelInUseError(CatalogError):
    def __init__(self, channel_id: str, product_count: int) -> None:
        super().__init__(
            f"Channel has {product_count} products and cannot be deleted"
        )
        self.channel_id = channel_id
        self.product_count = product_count

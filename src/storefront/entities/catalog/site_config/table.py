"""Site configuration key/value table."""

from sqlalchemy import Column, Text
from sqlmodel import Field, SQLModel


class SiteConfigTable(SQLModel, table=True):
    """Generic key/value settings store; banner slides live here as JSON."""

    __tablename__ = "site_config"

    key: str = Field(primary_key=True)
    value: str = Field(sa_column=Column(Text, nullable=False))

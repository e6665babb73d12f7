from __future__ import annotations
from typing import Optional
from datetime import datetime, timezone
from sqlmodel import SQLModel, Field, Column, String

# ----------------------------
# Helpers
# ----------------------------
def now_utc() -> datetime:
    return datetime.now(timezone.utc)

# ----------------------------
# Models
# ----------------------------

class Product(SQLModel, table=True):
    __tablename__ = "products"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(sa_column=Column(String(50), nullable=False))
    description: Optional[str] = Field(default=None, sa_column=Column(String(255)))
    price: float
    stock_quantity: int = Field(default=0, nullable=False)
    category: Optional[str] = Field(default=None, sa_column=Column(String(50)))
    image_url: Optional[str] = Field(default=None, sa_column=Column(String(255)))
    is_active: bool = Field(default=True, nullable=False)
    created_at: datetime = Field(default_factory=now_utc, nullable=False)
    updated_at: datetime = Field(default_factory=now_utc, nullable=False)

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import JSON, ForeignKey, String, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, registry

table_registry = registry()


@table_registry.mapped_as_dataclass
class User:
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(init=False, primary_key=True)
    username: Mapped[str]
    email: Mapped[str] = mapped_column(String, unique=True)
    age: Mapped[Optional[int]] = mapped_column(default=None)
    location: Mapped[str] = mapped_column(default="")
    bio: Mapped[str] = mapped_column(default="")
    # profile collections are stored as documents and validated by the domain model on read
    streaming_services: Mapped[List[Dict[str, Any]]] = mapped_column(JSON, default_factory=list)
    preferences: Mapped[Dict[str, Any]] = mapped_column(JSON, default_factory=dict)
    watch_history: Mapped[List[Dict[str, Any]]] = mapped_column(JSON, default_factory=list)
    favorite_movies: Mapped[List[Dict[str, Any]]] = mapped_column(JSON, default_factory=list)

    created_at: Mapped[datetime] = mapped_column(init=False, server_default=func.now())


@table_registry.mapped_as_dataclass
class Like:
    __tablename__ = "likes"
    __table_args__ = (UniqueConstraint("from_user_id", "to_user_id", name="uq_likes_from_to"),)

    id: Mapped[int] = mapped_column(init=False, primary_key=True)
    from_user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    to_user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    type: Mapped[str] = mapped_column(String(16))

    created_at: Mapped[datetime] = mapped_column(init=False, server_default=func.now())

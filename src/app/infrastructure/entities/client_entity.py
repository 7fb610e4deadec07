from datetime import date, datetime
from sqlalchemy import String, Date, DateTime, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.shared.database.database import Base


class ClientEntity(Base):
    """SQLAlchemy model for Client table."""
    __tablename__ = "clients"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), index=True)
    email: Mapped[str] = mapped_column(String(255), unique=True)
    birth_date: Mapped[date] = mapped_column(Date, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        server_default=func.now(),
        nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        server_default=func.now(),
        nullable=False
    )

    # Deleting a client removes its sales in the database (ON DELETE CASCADE)
    sales: Mapped[list["SaleEntity"]] = relationship(
        "SaleEntity",
        back_populates="client",
        passive_deletes=True,
    )

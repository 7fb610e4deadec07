from datetime import date, datetime

from sqlalchemy import Date, DateTime, ForeignKey, Numeric, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.shared.database.database import Base


class SaleEntity(Base):
    """SQLAlchemy model for Sale table."""
    __tablename__ = "sales"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    client_id: Mapped[int] = mapped_column(
        ForeignKey("clients.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    value: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)
    sale_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        server_default=func.now(),
        nullable=False
    )

    client: Mapped["ClientEntity"] = relationship(
        "ClientEntity",
        back_populates="sales"
    )

"""Customer table."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from order_flow_api.app.core.db import Base


class Customer(Base):
    """A customer who places orders.

    ``email`` carries a unique constraint so concurrent inserts that
    slip past the service pre-check are still rejected by the store.
    """

    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<Customer id={self.id} email={self.email!r}>"

"""Item table."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from order_flow_api.app.core.db import Base


class Item(Base):
    __tablename__ = "items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Item id={self.id} name={self.name!r}>"

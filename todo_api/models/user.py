import enum

from sqlalchemy import Column, Integer, String, Enum
from sqlalchemy.orm import relationship
from todo_api.database import Base


class Role(str, enum.Enum):
    USER = "User"
    ADMIN = "Admin"

    @classmethod
    def parse(cls, value) -> "Role":
        """Map a raw role value onto a Role; anything unrecognised is USER."""
        for role in cls:
            if value == role.value:
                return role
        return cls.USER


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    username = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    role = Column(
        Enum(Role, values_callable=lambda roles: [r.value for r in roles], native_enum=False),
        nullable=False,
        default=Role.USER,
    )

    tasks = relationship("Task", back_populates="owner")

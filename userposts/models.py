from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import Mapped
from userposts.database import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = Column(Integer, primary_key=True, index=True)
    name: Mapped[str] = Column(String, nullable=False)
    email: Mapped[str] = Column(String, nullable=False)


class Post(Base):
    __tablename__ = "posts"

    id: Mapped[int] = Column(Integer, primary_key=True, index=True)
    user_id: Mapped[int] = Column(Integer, ForeignKey("users.id"), index=True)
    title: Mapped[str] = Column(String, nullable=False)
    body: Mapped[str] = Column(String, nullable=False)


class Address(Base):
    __tablename__ = "addresses"

    id: Mapped[int] = Column(Integer, primary_key=True, index=True)
    user_id: Mapped[int] = Column(Integer, ForeignKey("users.id"), index=True)
    street: Mapped[str] = Column(String, nullable=False)

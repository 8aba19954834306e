"""
Storage access for users, posts and addresses.
"""

import logging
from typing import Any, List, Mapping

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from userposts.config import DEFAULT_POST_TITLE
from userposts.models import Address, Post, User

logger = logging.getLogger(__name__)


def user_rows_query():
    """users LEFT JOIN posts LEFT JOIN addresses, one row per combination."""
    return (
        select(
            User.id.label("user_id"),
            User.name,
            User.email,
            Post.id.label("post_id"),
            Post.body.label("post_body"),
            Post.title.label("post_title"),
            Address.id.label("address_id"),
            Address.street.label("address_street"),
        )
        .select_from(User)
        .outerjoin(Post, Post.user_id == User.id)
        .outerjoin(Address, Address.user_id == User.id)
    )


def list_user_rows(db: Session, limit: int, offset: int) -> List[Mapping[str, Any]]:
    # LIMIT/OFFSET count joined rows, not users.
    query = (
        user_rows_query()
        .order_by(User.id, Post.id, Address.id)
        .limit(limit)
        .offset(offset)
    )
    return db.execute(query).mappings().all()


def get_user_rows(db: Session, user_id: int) -> List[Mapping[str, Any]]:
    query = (
        user_rows_query()
        .where(User.id == user_id)
        .order_by(Post.id, Address.id)
    )
    return db.execute(query).mappings().all()


def create_user_with_address_and_post(
    db: Session, name: str, email: str, street: str, post_body: str
) -> int:
    """
    Insert a user together with one address and one post.

    All three rows are committed together or not at all. Returns the new
    user's id.
    """
    try:
        db_user = User(name=name, email=email)
        db.add(db_user)
        db.flush()
        user_id = db_user.id

        db.add(Address(user_id=user_id, street=street))
        db.add(Post(user_id=user_id, title=DEFAULT_POST_TITLE, body=post_body))
        db.flush()

        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.warning(f"Creating user {email!r} failed, transaction rolled back")
        raise

    logger.info(f"Created user {user_id} with address and post")
    return user_id


def delete_post(db: Session, post_id: int) -> bool:
    deleted = db.query(Post).filter(Post.id == post_id).delete()
    db.commit()

    return deleted > 0

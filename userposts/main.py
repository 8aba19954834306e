import logging
import re
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Depends, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from userposts.aggregate import build_user, group_user_rows
from userposts.config import (
    AGGREGATE_DEDUPE,
    ALLOWED_ORIGINS,
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
)
from userposts.database import close_database, get_db, init_database
from userposts.db import Message, UserCreate, UserDetail, UserPage
from userposts import repository


logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*[+-]?\d+")
_ROW_ID = re.compile(r"^[+-]?\d+$")

# largest value SQLite can bind as an INTEGER
MAX_SQL_INT = 2**63 - 1


def _bounded_int(digits: str) -> int:
    """int() of a signed digit string, saturated just past the INTEGER range."""
    sign = -1 if digits.lstrip().startswith("-") else 1
    # longer strings are out of range anyway and int() limits huge inputs
    if len(digits.strip().lstrip("+-").lstrip("0")) > 19:
        return sign * (MAX_SQL_INT + 1)

    return int(digits)


def parse_positive_int(value: Optional[str], default: int) -> int:
    """
    Read the leading integer of ``value`` ("2abc" gives 2).

    Missing, non-numeric, zero and negative values give ``default``. Values
    past SQLite's INTEGER range are capped at ``MAX_SQL_INT``.
    """
    if value is None:
        return default

    match = _LEADING_INT.match(value)
    if match is None:
        return default

    number = _bounded_int(match.group())
    if number <= 0:
        return default

    return min(number, MAX_SQL_INT)


def page_offset(page: int, limit: int) -> int:
    return min((page - 1) * limit, MAX_SQL_INT)


def parse_row_id(value: str) -> Optional[int]:
    """Path id as an integer, or None when no row could ever have it."""
    if _ROW_ID.match(value) is None:
        return None

    number = _bounded_int(value)
    if not -MAX_SQL_INT - 1 <= number <= MAX_SQL_INT:
        return None

    return number


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_database()
    yield
    close_database()


app = FastAPI(title="userposts", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception(f"Storage error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"detail": str(exc)})


@app.get("/users", response_model=UserPage)
async def users(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    db: Session = Depends(get_db),
) -> dict:
    page_number = parse_positive_int(page, DEFAULT_PAGE)
    page_size = parse_positive_int(limit, DEFAULT_LIMIT)

    rows = repository.list_user_rows(
        db, limit=page_size, offset=page_offset(page_number, page_size)
    )

    return {
        "data": group_user_rows(rows, dedupe=AGGREGATE_DEDUPE),
        "page": page_number,
        "limit": page_size,
    }


@app.get("/user/{id}", response_model=UserDetail)
async def user_detail(id: str, db: Session = Depends(get_db)) -> dict:
    user_id = parse_row_id(id)
    rows = [] if user_id is None else repository.get_user_rows(db, user_id)
    if not rows:
        raise HTTPException(status_code=404, detail="User not found")

    return {"data": build_user(rows, dedupe=AGGREGATE_DEDUPE)}


@app.post("/user", response_model=Message, status_code=201)
async def create_user(user: UserCreate, db: Session = Depends(get_db)) -> Message:
    repository.create_user_with_address_and_post(
        db,
        name=user.name,
        email=user.email,
        street=user.address,
        post_body=user.post_content,
    )

    return Message(message="User created successfully")


@app.delete("/post/{id}", response_model=Message)
async def delete_post(id: str, db: Session = Depends(get_db)) -> Message:
    post_id = parse_row_id(id)
    if post_id is None or not repository.delete_post(db, post_id):
        raise HTTPException(status_code=404, detail="Post not found")

    logger.info(f"Deleted post {post_id}")
    return Message(message="Post deleted successfully")


@app.get("/health")
async def health(db: Session = Depends(get_db)) -> dict:
    db.execute(text("SELECT 1"))

    return {"status": "healthy", "database": "connected"}

from typing import List

from pydantic import BaseModel, Field


class PostOut(BaseModel):
    post_id: int
    title: str
    body: str


class AddressOut(BaseModel):
    address_id: int
    street: str


class UserOut(BaseModel):
    user_id: int
    name: str
    email: str
    posts: List[PostOut] = []
    addresses: List[AddressOut] = []


class UserPage(BaseModel):
    data: List[UserOut]
    page: int
    limit: int


class UserDetail(BaseModel):
    data: UserOut


class UserCreate(BaseModel):
    name: str
    email: str
    address: str
    post_content: str = Field(alias="postContent")

    class Config:
        populate_by_name = True


class Message(BaseModel):
    message: str

from pydantic import BaseModel, Field

from .limits import MAX_CONTENT_LENGTH, MAX_AUTHOR_LENGTH, MAX_USERNAME_LENGTH


class PickRequest(BaseModel):
    username: str = Field(min_length=1, max_length=MAX_USERNAME_LENGTH)


class PickResponse(BaseModel):
    content: str
    author: str
    creator: str


class CreateRequest(BaseModel):
    content: str = Field(min_length=1, max_length=MAX_CONTENT_LENGTH)
    author: str = Field(min_length=1, max_length=MAX_AUTHOR_LENGTH)
    username: str = Field(min_length=1, max_length=MAX_USERNAME_LENGTH)


class CreateResponse(BaseModel):
    all_count: int
    user_count: int


class StatsRequest(BaseModel):
    username: str = Field(min_length=1, max_length=MAX_USERNAME_LENGTH)


class StatsResponse(BaseModel):
    all_count: int
    user_count: int
    all_visits: int
    today_visits: int

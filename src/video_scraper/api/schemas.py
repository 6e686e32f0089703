from pydantic import BaseModel


class VideoItem(BaseModel):
    title: str
    link: str
    channel: str
    thumbnail: str
    views: int


class SearchResponse(BaseModel):
    videos: list[VideoItem]


class ErrorResponse(BaseModel):
    error: str


class RootResponse(BaseModel):
    message: str
    version: str

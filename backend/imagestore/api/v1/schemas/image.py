from pydantic import BaseModel, Field


class ImageSaveRequest(BaseModel):
    imageData: str
    fileName: str = Field(min_length=1)


class ImageSaveResponse(BaseModel):
    ok: bool = True
    path: str


class ImageDeleteResponse(BaseModel):
    ok: bool = True
    deleted: int

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class LoadResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    translations: dict[str, dict[str, Any]]
    all_keys: list[str] | None = Field(default=None, alias="allKeys")
    main_lang: str = Field(default="en", alias="mainLang")


class FullSaveRequest(BaseModel):
    translations: dict[str, dict[str, Any]]


class KeySaveRequest(BaseModel):
    key: str
    values: dict[str, Any]


class SaveAck(BaseModel):
    status: str = "ok"
    languages: list[str] = []

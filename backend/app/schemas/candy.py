"""Candy-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field


class CandyCreate(BaseModel):
    """Candy create request.

    Decoding is structural only: missing fields default to an empty string,
    unknown fields are ignored, non-string values are rejected.
    """

    model_config = ConfigDict(extra="ignore")

    name: str = Field("", description="糖果名称")
    kind: str = Field("", description="糖果种类")


class Candy(BaseModel):
    """Complete candy record for API responses."""

    id: str = Field(..., description="记录 ID（由服务端生成）")
    name: str = Field("", description="糖果名称")
    kind: str = Field("", description="糖果种类")

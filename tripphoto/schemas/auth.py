from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class TokenRequest(BaseModel):
    username: str = ""
    emp_code: str = Field(default="", alias="empCode")
    site: str = ""

    model_config = ConfigDict(populate_by_name=True)


class TokenResponse(BaseModel):
    token: str


class Claims(BaseModel):
    username: str = ""
    employee_code: str = Field(default="", alias="empCode")
    site: str = ""
    issued_at: datetime = Field(alias="iat")
    expires_at: datetime = Field(alias="exp")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

from typing import Optional, List

from pydantic import BaseModel, ConfigDict, Field


class UploadRequest(BaseModel):
    # Missing tripNum is reported by the validator, not by pydantic
    trip_num: str = Field(default="", alias="tripNum")
    odometer_photo: Optional[str] = Field(default=None, alias="odometerPhoto")
    cargo_photo: Optional[str] = Field(default=None, alias="cargoPhoto")

    model_config = ConfigDict(populate_by_name=True)


class UploadResponse(BaseModel):
    success: bool = True
    file_ids: List[str] = Field(default_factory=list, alias="fileIds")

    model_config = ConfigDict(populate_by_name=True)

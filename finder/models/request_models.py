# backend/finder/models/request_models.py
import math
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from finder.core.config import settings


class GeoQuery(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    lat: float
    lng: float
    # kilometres, as sent by the client
    radius_km: float = Field(alias="radius", ge=0)

    @field_validator("lat", "lng", "radius_km")
    @classmethod
    def _finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("must be a finite number")
        return v


# keeps (page - 1) * limit well inside a BSON int64 for $skip
MAX_PAGE = 1_000_000


class PageRequest(BaseModel):
    page: int = Field(default=1, ge=1, le=MAX_PAGE)
    limit: int = settings.PAGE_SIZE

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    @classmethod
    def from_query(cls, raw_page: Optional[str]) -> "PageRequest":
        """Lenient page parsing: anything unparsable is page 1, out-of-range pages are clamped."""
        try:
            page = int(raw_page) if raw_page is not None else 1
        except (TypeError, ValueError):
            page = 1
        return cls(page=min(MAX_PAGE, max(1, page)))


class LabelScore(BaseModel):
    label: str
    score: float

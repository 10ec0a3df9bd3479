from pydantic import BaseModel, Field, StrictInt

from app.shared.timezones import City


class ConversionRequest(BaseModel):
    city: City = Field(..., description="Source city, 'Toronto' or 'Tehran'")
    hour: StrictInt = Field(0, ge=0, le=23, description="Hour on a 24-hour clock")
    minute: StrictInt = Field(0, ge=0, le=59, description="Minute of the hour")

class ConversionResponse(BaseModel):
    source_city: str = Field(..., description="City the clock time was given in")
    source_time: str = Field(..., description="Time in h:mm AM/PM format")
    target_city: str = Field(..., description="The other city")
    target_time: str = Field(..., description="Time in h:mm AM/PM format")

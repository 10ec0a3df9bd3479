from pydantic import BaseModel, Field

class CurrentTimeResponse(BaseModel):
    toronto_time: str = Field(..., description="ISO-8601 timestamp with UTC offset")
    tehran_time: str = Field(..., description="ISO-8601 timestamp with UTC offset")
    toronto_time_str: str = Field(..., description="Time in 'h:mm AM/PM - Month D, YYYY' format")
    tehran_time_str: str = Field(..., description="Time in 'h:mm AM/PM - Month D, YYYY' format")

from pydantic import BaseModel


METHOD_NOT_ALLOWED = "Method not allowed"
INGREDIENTS_REQUIRED = "Ingredients text is required"
ANALYSIS_FAILED = "Error analyzing ingredients"


class MessageResponse(BaseModel):
    message: str


class VersionResponse(BaseModel):
    version: str

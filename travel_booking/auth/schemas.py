from pydantic import BaseModel, Field

class AuthRequest(BaseModel):
    # Stored and signed exactly as submitted; emails are case-sensitive keys
    email: str = Field(..., min_length=1)
    password: str

class AuthResponse(BaseModel):
    token: str
    email: str

import pydantic as p

class CredentialsModel(p.BaseModel):
    email: str = p.Field(min_length=3, max_length=254, description='Account email')
    password: str = p.Field(min_length=1, max_length=72, description='Account password')

    model_config = p.ConfigDict(extra="forbid")

class SessionResponse(p.BaseModel):
    session: str = p.Field(description='Session token, also set as the session cookie')

class PrincipalResponse(p.BaseModel):
    user_id: str

class ErrorResponse(p.BaseModel):
    successful: bool = False
    code: str
    detail: str

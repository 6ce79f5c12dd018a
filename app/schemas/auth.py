from pydantic import BaseModel


class AdminLoginRequest(BaseModel):
    email: str
    password: str


class AdminUser(BaseModel):
    id: str
    email: str
    name: str


class AdminLoginResponse(BaseModel):
    token: str
    user: AdminUser

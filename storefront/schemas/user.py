from pydantic import BaseModel, EmailStr


class SignupSchema(BaseModel):
    email: EmailStr | None = None
    password: str | None = None
    name: str | None = None


class LoginSchema(BaseModel):
    email: EmailStr | None = None
    password: str | None = None


class UserOut(BaseModel):
    id: int
    email: EmailStr
    name: str


class AuthOut(BaseModel):
    message: str
    token: str
    user: UserOut

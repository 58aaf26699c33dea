from pydantic import BaseModel, EmailStr, Field, field_validator

from app.models import Customer

EMAIL_MAX_LENGTH = 150


class CustomerCreate(BaseModel):
    """
    客户创建请求模型

    用于API接口创建客户的请求数据
    """
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr

    @field_validator("email")
    @classmethod
    def check_email_length(cls, v: str) -> str:
        if len(v) > EMAIL_MAX_LENGTH:
            raise ValueError(f"Email cannot exceed {EMAIL_MAX_LENGTH} characters")
        return v

    def to_model(self) -> Customer:
        return Customer(name=self.name, email=str(self.email))


class CustomerUpdate(CustomerCreate):
    """
    客户更新请求模型

    更新为整体覆盖，请求体需携带完整的客户数据
    """
    id: int

    def to_model(self) -> Customer:
        return Customer(id=self.id, name=self.name, email=str(self.email))

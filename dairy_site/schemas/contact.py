from pydantic import BaseModel, EmailStr, Field


class ContactForm(BaseModel):
    """Visitor message from the contact page."""

    name: str = Field(..., min_length=2, max_length=200)
    email: EmailStr
    message: str = Field(..., min_length=10, max_length=5000)

from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic_core import PydanticCustomError

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def check_email(value: str) -> str:
    """Validate the address syntax; the value is stored as typed."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise PydanticCustomError(
            "value_error",
            "value is not a valid email address: {reason}",
            {"reason": str(e)},
        )
    return value


Email = Annotated[str, AfterValidator(check_email)]


class StudentBase(BaseModel):
    name: str = Field(min_length=1)
    email: Email
    age: int = Field(gt=0, le=INT64_MAX, strict=True)


class StudentCreate(StudentBase):
    pass


class StudentInDB(StudentBase):
    id: int

    model_config = ConfigDict(from_attributes=True)


class Student(StudentInDB):
    pass


class CreatedResponse(BaseModel):
    id: int

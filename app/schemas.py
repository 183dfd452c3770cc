from enum import Enum
from typing import Annotated, List

from pydantic import AfterValidator, AnyUrl, BaseModel, BeforeValidator, Field, TypeAdapter, ValidationError

_any_url = TypeAdapter(AnyUrl)


def _reject_non_numbers(value):
    """JSON numbers only: no strings, no booleans. Whole floats like 2016.0 still pass."""
    if isinstance(value, (str, bytes, bool)):
        raise ValueError("Input should be a number")
    return value


def _check_url(value: str) -> str:
    # Any absolute URL; the string is kept exactly as sent
    try:
        _any_url.validate_python(value)
    except ValidationError:
        raise ValueError("Poster must be a valid URL") from None
    return value


Number = BeforeValidator(_reject_non_numbers)
PosterUrl = Annotated[str, AfterValidator(_check_url)]
Year = Annotated[int, Number, Field(ge=1900, le=2024)]
Duration = Annotated[int, Number, Field(gt=0)]
Rate = Annotated[float, Number, Field(ge=0, le=10)]


class Genre(str, Enum):
    ACTION = "Action"
    ADVENTURE = "Adventure"
    CRIME = "Crime"
    COMEDY = "Comedy"
    DRAMA = "Drama"
    FANTASY = "Fantasy"
    HORROR = "Horror"
    THRILLER = "Thriller"
    SCI_FI = "Sci-Fi"


class MovieCreate(BaseModel):
    title: str
    year: Year
    director: str
    duration: Duration
    rate: Rate = 5
    poster: PosterUrl
    genre: List[Genre]

    def to_record(self) -> dict:
        return self.model_dump(mode="json")


class MovieUpdate(BaseModel):
    """Same rules as MovieCreate, but every field may be left out.

    Defaults are never validated, so an omitted field stays unset while an
    explicit null is still rejected.
    """
    title: str = None
    year: Year = None
    director: str = None
    duration: Duration = None
    rate: Rate = None
    poster: PosterUrl = None
    genre: List[Genre] = None

    def to_changes(self) -> dict:
        return self.model_dump(mode="json", exclude_unset=True)


class Movie(BaseModel):
    id: str
    title: str
    year: int
    director: str
    duration: int
    rate: float
    poster: str
    genre: List[str]


class MessageResponse(BaseModel):
    message: str


def validate_movie(payload) -> dict:
    """Validates a full movie payload. Raises pydantic.ValidationError."""
    return MovieCreate.model_validate(payload).to_record()

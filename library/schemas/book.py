"""Book request/response schemas - REST API contract."""

from pydantic import BaseModel, FiniteFloat


class BookBase(BaseModel):
    title: str
    author_name: str
    price: float
    ebook_available: bool
    publish_date: str


class BookCreate(BaseModel):
    # Optional here so missing fields reach the service validators (400, not 422)
    title: str | None = None
    author_name: str | None = None
    price: FiniteFloat | None = None
    ebook_available: bool | None = None
    publish_date: str | None = None
    username: str | None = None


class BookTitleUpdate(BaseModel):
    title: str | None = None
    username: str | None = None


class BookFilters(BaseModel):
    title: str | None = None
    author_name: str | None = None
    min_price: FiniteFloat | None = None
    max_price: FiniteFloat | None = None


class BookQuery(BookFilters):
    """Query string of GET /books: filters plus the acting user."""

    username: str | None = None

    def filters(self) -> BookFilters:
        return BookFilters(**self.model_dump(exclude={"username"}))


class BookResponse(BookBase):
    id: str


class StoreInventory(BaseModel):
    total_books: int
    authors: int


class MessageResponse(BaseModel):
    message: str

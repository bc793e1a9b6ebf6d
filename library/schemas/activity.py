"""User activity schemas."""

from pydantic import BaseModel


class UserAction(BaseModel):
    username: str
    method: str
    route: str

    @property
    def action(self) -> str:
        """Stored form: "<METHOD> <ROUTE>"."""
        return f"{self.method} {self.route}"

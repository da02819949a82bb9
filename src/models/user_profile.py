from src.models.base import CamelModel


class UserProfile(CamelModel):
    id: int
    first_name: str
    last_name: str
    email: str

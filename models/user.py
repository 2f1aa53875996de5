from dataclasses import dataclass


@dataclass
class User:
    user_id: str
    username: str
    name: str
    role: str = "ADMIN"  # "ADMIN", "MANAGER"

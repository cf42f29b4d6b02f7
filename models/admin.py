from dataclasses import dataclass


@dataclass
class Admin:
    id: str
    username: str
    email: str

    @classmethod
    def from_dict(cls, data: dict) -> "Admin":
        return cls(
            id=str(data.get("id") or data.get("_id") or ""),
            username=data.get("username", ""),
            email=data.get("email", ""),
        )

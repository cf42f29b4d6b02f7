from dataclasses import dataclass


@dataclass
class User:
    """A customer an order can be placed for."""
    id: str
    name: str
    email: str
    mobile: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        return cls(
            id=str(data.get("_id", "")),
            name=data.get("name", ""),
            email=data.get("email", ""),
            mobile=data.get("mobile", "") or "",
        )

    def to_payload(self) -> dict:
        return {"name": self.name, "email": self.email, "mobile": self.mobile}

    @property
    def label(self) -> str:
        return f"{self.name} ({self.email})"

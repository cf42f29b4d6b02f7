from dataclasses import dataclass


@dataclass
class Category:
    id: str
    name: str
    description: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "Category":
        return cls(
            id=str(data.get("_id", "")),
            name=data.get("name", ""),
            description=data.get("description", "") or "",
        )

    def to_payload(self) -> dict:
        return {"name": self.name, "description": self.description}

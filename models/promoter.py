"""
Promoter Model - Typed representation of promoter documents
"""
from dataclasses import dataclass
from typing import Optional, Dict


@dataclass
class Promoter:
    """Represents a promoter campaigns are assigned to"""
    doc_id: str
    name: str = ""
    email: str = ""
    phone: str = ""
    image_url: str = ""

    @classmethod
    def from_document(cls, doc_id: str, data: Optional[dict]) -> 'Promoter':
        """Create Promoter from a stored document"""
        data = data if isinstance(data, dict) else {}
        return cls(
            doc_id=doc_id,
            name=data.get('name') or "",
            email=data.get('email') or "",
            phone=data.get('phone') or "",
            image_url=data.get('imageUrl') or "",
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "imageUrl": self.image_url,
            "docId": self.doc_id,
        }

from typing import Any, Dict, Literal, Optional
from pydantic import BaseModel

class SourceDescriptor(BaseModel):
    name: str
    url: str
    kind: Literal["xml", "json"]
    language: str
    method: Literal["GET", "POST"] = "GET"
    body: Optional[Dict[str, Any]] = None

    @property
    def accept(self) -> str:
        if self.kind == "xml":
            return "application/xml, text/xml"
        return "application/json"

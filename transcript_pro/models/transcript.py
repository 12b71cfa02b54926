from typing import List
from pydantic import BaseModel

class Segment(BaseModel):
    text: str
    start: float = 0.0
    duration: float = 0.0

    @property
    def end(self) -> float:
        return self.start + self.duration

class Transcript(BaseModel):
    video_id: str
    language: str
    source: str
    segments: List[Segment]

from pydantic import BaseModel
from typing import Optional

from bitflip.config.bconfig import DEFAULT_MODE

class BitflipRequest(BaseModel):
    value: str
    mode: str = DEFAULT_MODE
    encoding: str = "utf-8"
    allowed_chars: Optional[str] = None
    limit: Optional[int] = None
    output_format: str = "json"

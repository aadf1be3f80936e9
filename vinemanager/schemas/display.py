from typing import Optional

from pydantic import BaseModel


class DisplayRead(BaseModel):
    color: str
    icon: Optional[str] = None

    model_config = {"from_attributes": True}

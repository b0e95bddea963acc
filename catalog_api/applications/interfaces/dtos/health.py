from typing import Dict

from pydantic import BaseModel


class HealthStatus(BaseModel):
    status: str
    service: str
    checks: Dict[str, str]

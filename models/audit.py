from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class AuditEntry:
    timestamp: datetime
    action: str              # "select", "deselect", "limit_exceeded", "force_deselect", "regenerate", "max_selection"
    seat_id: Optional[str]
    detail: str = ""

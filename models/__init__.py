from models.seat import Seat, Row
from models.aircraft import AircraftConfig, CabinSection
from models.selection import SelectionChange
from models.audit import AuditEntry

"""Name ledger: durable record of issued name slugs."""

from image_namer.ledger.factory import get_ledger
from image_namer.ledger.memory import InMemoryNameLedger
from image_namer.ledger.ports import NameLedger
from image_namer.ledger.sql import SqlNameLedger

__all__ = ["NameLedger", "InMemoryNameLedger", "SqlNameLedger", "get_ledger"]

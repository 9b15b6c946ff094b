from tripjournal.service.memory import MemoryJournalService

__all__ = ["MemoryJournalService"]

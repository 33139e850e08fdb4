from daybook.domains.journal.models.journal_entry import JournalEntry, JournalEntryTag

__all__ = ["JournalEntry", "JournalEntryTag"]

"""
Work experience and education entries kept on a seeker profile.

Entries are stored as a JSON list on the profile row; inside the code they
are handled as immutable ordered lists with append and remove-by-id.
"""
import logging
import uuid
from dataclasses import asdict, dataclass, fields, replace
from typing import Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkExperience:
    id: str
    job_title: str
    company_name: str
    description: str = ''
    start_date: Optional[str] = None
    end_date: Optional[str] = None


@dataclass(frozen=True)
class Education:
    id: str
    institution_name: str
    degree: str
    field_of_study: str = ''
    start_year: Optional[int] = None
    end_year: Optional[int] = None


class EntryList:
    """Ordered, immutable collection of profile history entries."""
    entry_class = None

    def __init__(self, entries=()):
        self._entries: Tuple = tuple(entries)

    def __iter__(self):
        return iter(self._entries)

    def __len__(self):
        return len(self._entries)

    def __bool__(self):
        return bool(self._entries)

    def __eq__(self, other):
        return type(self) is type(other) and self._entries == other._entries

    def get(self, entry_id):
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def append(self, entry):
        """Add ``entry`` at the end under a fresh id; returns ``(new_list, stored_entry)``."""
        entry = replace(entry, id=uuid.uuid4().hex)
        return type(self)(self._entries + (entry,)), entry

    def remove(self, entry_id):
        """Return a new list without ``entry_id``; contents are unchanged if it is absent."""
        return type(self)(entry for entry in self._entries if entry.id != entry_id)

    def to_json(self):
        return [asdict(entry) for entry in self._entries]

    @classmethod
    def from_json(cls, raw):
        if not raw:
            return cls()
        if not isinstance(raw, list):
            logger.warning(f"Discarding malformed {cls.__name__} payload of type {type(raw).__name__}")
            return cls()

        known = {f.name for f in fields(cls.entry_class)}
        entries = []
        for item in raw:
            if not isinstance(item, dict) or 'id' not in item:
                logger.warning(f"Skipping malformed {cls.entry_class.__name__} entry: {item!r}")
                continue
            try:
                entries.append(cls.entry_class(**{k: v for k, v in item.items() if k in known}))
            except TypeError:
                logger.warning(f"Skipping incomplete {cls.entry_class.__name__} entry: {item!r}")
        return cls(entries)


class WorkExperienceList(EntryList):
    entry_class = WorkExperience


class EducationList(EntryList):
    entry_class = Education

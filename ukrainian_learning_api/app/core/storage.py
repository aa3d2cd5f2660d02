"""
In-memory data store.

``MemStorage`` keeps one dict per entity kind, keyed by a generated
UUID string.  Dicts preserve insertion order, which every "collection
order" result below relies on.  Records are pydantic models and are
mutated in place, so changes are visible to the next call immediately.

None of the methods suspend or touch I/O, so they run atomically with
respect to each other inside the event loop and need no locking.
Read methods report absence with ``None`` or an empty list; only
``create_user`` raises, for a duplicate username.

The store starts empty.  ``app.core.seed.seed_storage`` fills it with
the sample content at application startup.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from fastapi import Request

from .errors import ConflictError
from .security import hash_password
from ..schemas.community import CommunityResource, CommunityResourceCreate, ResourceType
from ..schemas.dictionary import DictionaryEntry, DictionaryEntryCreate
from ..schemas.history import HistoricalEvent, HistoricalEventCreate
from ..schemas.learning import LearningModule, LearningModuleCreate
from ..schemas.translation import Translation, TranslationCreate
from ..schemas.user import User, UserCreate


logger = logging.getLogger(__name__)

# Unfiltered translation listings are cut to this many records.
UNFILTERED_TRANSLATIONS_LIMIT = 10
# Maximum number of dictionary search results.
DICTIONARY_SEARCH_LIMIT = 50


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


class MemStorage:
    """Process-wide store for users, translations and learning content.

    Parameters
    ----------
    clock : Callable[[], datetime], optional
        Returns the current instant.  Used for creation timestamps and
        for deciding which events are upcoming.  Defaults to the UTC
        wall clock.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        self.clock = clock or utcnow
        self.users: Dict[str, User] = {}
        self.translations: Dict[str, Translation] = {}
        self.dictionary_entries: Dict[str, DictionaryEntry] = {}
        self.historical_events: Dict[str, HistoricalEvent] = {}
        self.learning_modules: Dict[str, LearningModule] = {}
        self.community_resources: Dict[str, CommunityResource] = {}

    # -- users -------------------------------------------------------------

    def get_user(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        for user in self.users.values():
            if user.username == username:
                return user
        return None

    def create_user(self, data: UserCreate) -> User:
        """Register a user with zero progress.

        Raises ``ConflictError`` if the username is already taken.  The
        password is stored as a salted hash.
        """
        if self.get_user_by_username(data.username) is not None:
            raise ConflictError(f"Username {data.username!r} already exists")
        user = User(
            id=_new_id(),
            username=data.username,
            password=hash_password(data.password),
            learning_progress=0,
            completed_lessons=[],
            favorite_translations=[],
            created_at=self.clock(),
        )
        self.users[user.id] = user
        logger.info("Created user %s (%s)", user.id, user.username)
        return user

    def update_user_progress(self, user_id: str, progress: int, completed_lessons: List[str]) -> None:
        """Overwrite progress and completed lessons; unknown ids are ignored."""
        user = self.users.get(user_id)
        if user is None:
            logger.debug("Progress update for unknown user %s ignored", user_id)
            return
        user.learning_progress = progress
        user.completed_lessons = list(completed_lessons)

    # -- translations ------------------------------------------------------

    def save_translation(self, data: TranslationCreate) -> Translation:
        translation = Translation(
            id=_new_id(),
            ukrainian_text=data.ukrainian_text,
            english_text=data.english_text,
            user_id=data.user_id or None,
            is_favorite=bool(data.is_favorite),
            created_at=self.clock(),
        )
        self.translations[translation.id] = translation
        logger.info("Saved translation %s", translation.id)
        return translation

    def get_user_translations(self, user_id: Optional[str] = None) -> List[Translation]:
        """Return saved translations.

        Without ``user_id`` this is the first ten records in insertion
        order, not the most recent ones.  With ``user_id`` every record of
        that user is returned newest first; equal timestamps keep their
        insertion order.
        """
        if not user_id:
            return list(self.translations.values())[:UNFILTERED_TRANSLATIONS_LIMIT]
        matching = [t for t in self.translations.values() if t.user_id == user_id]
        # sorted() is stable with reverse=True as well
        return sorted(matching, key=lambda t: t.created_at, reverse=True)

    def toggle_favorite_translation(self, translation_id: str) -> None:
        translation = self.translations.get(translation_id)
        if translation is not None:
            translation.is_favorite = not translation.is_favorite

    # -- dictionary --------------------------------------------------------

    def add_dictionary_entry(self, data: DictionaryEntryCreate) -> DictionaryEntry:
        entry = DictionaryEntry(id=_new_id(), **data.model_dump())
        self.dictionary_entries[entry.id] = entry
        return entry

    def search_dictionary(self, query: str) -> List[DictionaryEntry]:
        """Case-insensitive substring search over both languages."""
        needle = query.lower()
        results: List[DictionaryEntry] = []
        for entry in self.dictionary_entries.values():
            if needle in entry.ukrainian_word.lower() or needle in entry.english_translation.lower():
                results.append(entry)
                if len(results) == DICTIONARY_SEARCH_LIMIT:
                    break
        return results

    def get_dictionary_entry(self, entry_id: str) -> Optional[DictionaryEntry]:
        return self.dictionary_entries.get(entry_id)

    def get_all_dictionary_entries(self) -> List[DictionaryEntry]:
        return list(self.dictionary_entries.values())

    # -- history -----------------------------------------------------------

    def add_historical_event(self, data: HistoricalEventCreate) -> HistoricalEvent:
        event = HistoricalEvent(id=_new_id(), **data.model_dump())
        self.historical_events[event.id] = event
        return event

    def get_historical_events(self) -> List[HistoricalEvent]:
        return sorted(self.historical_events.values(), key=lambda e: e.year)

    def get_historical_events_by_year(self, year: int) -> List[HistoricalEvent]:
        return [e for e in self.historical_events.values() if e.year == year]

    # -- learning ----------------------------------------------------------

    def add_learning_module(self, data: LearningModuleCreate) -> LearningModule:
        module = LearningModule(id=_new_id(), **data.model_dump())
        self.learning_modules[module.id] = module
        return module

    def get_learning_modules(self) -> List[LearningModule]:
        return sorted(self.learning_modules.values(), key=lambda m: m.order_index or 0)

    def get_learning_module(self, module_id: str) -> Optional[LearningModule]:
        return self.learning_modules.get(module_id)

    # -- community ---------------------------------------------------------

    def add_community_resource(self, data: CommunityResourceCreate) -> CommunityResource:
        resource = CommunityResource(id=_new_id(), **data.model_dump())
        self.community_resources[resource.id] = resource
        return resource

    def get_community_resources(self, resource_type: Optional[str] = None) -> List[CommunityResource]:
        """Active resources, optionally restricted to one exact type."""
        resources = [r for r in self.community_resources.values() if r.is_active]
        if resource_type:
            resources = [r for r in resources if r.type == resource_type]
        return resources

    def get_upcoming_events(self) -> List[CommunityResource]:
        """Active events dated strictly after now, soonest first."""
        now = self.clock()
        upcoming = [
            r
            for r in self.community_resources.values()
            if r.type == ResourceType.EVENT and r.is_active and r.event_date is not None and r.event_date > now
        ]
        return sorted(upcoming, key=lambda r: r.event_date)


def get_storage(request: Request) -> MemStorage:
    """FastAPI dependency returning the store attached to the running app."""
    return request.app.state.storage

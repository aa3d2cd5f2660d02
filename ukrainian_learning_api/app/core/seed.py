"""
Sample content inserted into the store at application startup.

The records cover the Ukrainian community of Manitoba: a timeline of
settlement history, three English learning modules for newcomers,
cultural centres, services and festivals, and a starter dictionary of
everyday phrases.  ``seed_storage`` is called once by ``create_app``;
users and translations are never seeded.
"""

import logging
from datetime import datetime, timezone

from .storage import MemStorage
from ..schemas.community import CommunityResourceCreate
from ..schemas.dictionary import DictionaryEntryCreate
from ..schemas.history import HistoricalEventCreate
from ..schemas.learning import LearningModuleCreate


logger = logging.getLogger(__name__)


HISTORICAL_EVENTS = [
    {
        "year": 1891,
        "title": "First Ukrainian Family",
        "description": (
            "The first Ukrainian family arrived in Manitoba in 1891, settling on a farm near Gretna, "
            "where many Mennonites who spoke Ukrainian already lived."
        ),
        "category": "Pioneer Settlement",
        "importance": 5,
    },
    {
        "year": 1892,
        "title": "Nebyliv Families Settle",
        "description": (
            "The nucleus of Winnipeg's Ukrainian community consisted of ten families from the village "
            "of Nebyliv, Kalush county, Galicia, who arrived in 1892–3."
        ),
        "category": "Pioneer Settlement",
        "importance": 4,
    },
    {
        "year": 1896,
        "title": "Cyril Genik Arrives",
        "description": (
            "Cyril Genik, leading a group of families, arrived in Winnipeg in fall 1896. This group was "
            "the spearhead of mass Ukrainian immigration to Canada. Genik became the first "
            "Ukrainian-Canadian in federal civil service."
        ),
        "category": "Mass Immigration",
        "importance": 5,
    },
    {
        "year": 1897,
        "title": "First Orthodox Church",
        "description": (
            "A group of settlers from Bukovyna established homes in Gardenton, Manitoba. St. Michael's "
            "Ukrainian Orthodox Church, Canada's first permanent Ukrainian Orthodox Church, was "
            "consecrated there in 1899."
        ),
        "category": "Religious",
        "importance": 4,
    },
    {
        "year": 1914,
        "title": "Internment Operations Begin",
        "description": (
            "About 5,000 Ukrainian men, women and children were interned at government camps, "
            "including Fort Osborne Barracks in Winnipeg and the Brandon internment camp."
        ),
        "category": "Dark Chapter",
        "importance": 5,
    },
    {
        "year": 1915,
        "title": "Taras Ferley - First MLA",
        "description": (
            "Taras Ferley became the first Ukrainian-Canadian Member of Legislative Assembly in the "
            "Gimli electoral district (Independent, 1915)."
        ),
        "category": "Political Representation",
        "importance": 4,
    },
    {
        "year": 1950,
        "title": "Nicholas Bachynsky as Speaker",
        "description": "In 1950 Nicholas Bachynsky became the speaker of the assembly.",
        "category": "Political Representation",
        "importance": 3,
    },
    {
        "year": 1955,
        "title": "First Cabinet Minister",
        "description": "In 1955 Michael Hryhorczuk was appointed the first Manitoba cabinet minister of Ukrainian origin.",
        "category": "Political Representation",
        "importance": 4,
    },
]


def _lessons(*items):
    return {"lessons": [{"id": i, "title": title, "completed": done} for i, (title, done) in enumerate(items, 1)]}


LEARNING_MODULES = [
    {
        "title": "Daily Conversations",
        "description": "Shopping, asking for directions, basic interactions",
        "difficulty": "Beginner",
        "estimated_time": 15,
        "has_audio": True,
        "has_voice_practice": True,
        "has_certificate": False,
        "content": _lessons(("Greetings", True), ("Shopping", True), ("Directions", False)),
        "order_index": 1,
    },
    {
        "title": "Workplace English",
        "description": "Professional communication, job interviews, email writing",
        "difficulty": "Intermediate",
        "estimated_time": 20,
        "has_audio": True,
        "has_voice_practice": False,
        "has_certificate": True,
        "content": _lessons(("Job Interviews", True), ("Email Writing", False), ("Meeting Language", False)),
        "order_index": 2,
    },
    {
        "title": "Canadian Culture & Customs",
        "description": "Understanding Canadian social norms, holidays, expressions",
        "difficulty": "Intermediate",
        "estimated_time": 25,
        "has_audio": True,
        "has_voice_practice": False,
        "has_certificate": False,
        "content": _lessons(("Canadian Holidays", False), ("Social Customs", False), ("Expressions", False)),
        "order_index": 3,
    },
]


COMMUNITY_RESOURCES = [
    {
        "name": "Oseredok Ukrainian Cultural Centre",
        "type": "cultural_center",
        "address": "184 Alexander Avenue East, Winnipeg",
        "phone": "(204) 942-0218",
        "website": "https://oseredok.ca",
        "description": (
            "Museum • Archives • Library • Gallery - largest Ukrainian cultural institution of its kind in Canada"
        ),
    },
    {
        "name": "Ukrainian Museum of Canada - Manitoba Branch",
        "type": "cultural_center",
        "address": "Holy Trinity Ukrainian Orthodox Metropolitan Cathedral (ground floor)",
        "phone": "(204) 942-0176",
        "website": "https://umcmb.ca",
        "description": "Ukrainian folk arts collection, traditional dress from various regions, library, gift shop",
    },
    {
        "name": "Canada's National Ukrainian Festival",
        "type": "event",
        "address": "Selo Ukraina, 10 km south of Dauphin, MB",
        "description": (
            "60th Anniversary celebration with grandstand performances, Ukrainian talent from around "
            "the world, cultural displays, food, dance, music, arts & crafts"
        ),
        "event_date": datetime(2025, 8, 1, tzinfo=timezone.utc),
    },
    {
        "name": "Ukrainian Independence Day Celebration",
        "type": "event",
        "address": "ACCESS Centre, West St. Paul, MB",
        "description": "Community celebration with free admission, family event",
        "event_date": datetime(2025, 8, 24, tzinfo=timezone.utc),
    },
    {
        "name": "Ukrainian Canadian Congress - Manitoba",
        "type": "service",
        "address": "203-952 Main Street, Winnipeg, MB R2W 3P4",
        "phone": "(204) 943-1515",
        "website": "https://uccmanitoba.ca",
        "description": "Coordinates Ukrainian-Canadian community activities, immigration assistance, cultural events",
    },
]


DICTIONARY_ENTRIES = [
    {
        "ukrainian_word": "Привіт",
        "english_translation": "Hello",
        "pronunciation": "pry-VEET",
        "part_of_speech": "interjection",
        "examples": [{"ukrainian": "Привіт! Як справи?", "english": "Hello! How are you?"}],
        "category": "greetings",
    },
    {
        "ukrainian_word": "Дякую",
        "english_translation": "Thank you",
        "pronunciation": "DYA-ku-yu",
        "part_of_speech": "interjection",
        "examples": [{"ukrainian": "Дякую за допомогу.", "english": "Thank you for the help."}],
        "category": "greetings",
    },
    {
        "ukrainian_word": "Будь ласка",
        "english_translation": "Please",
        "pronunciation": "bood LAS-ka",
        "part_of_speech": "interjection",
        "examples": [{"ukrainian": "Можете допомогти, будь ласка?", "english": "Can you help, please?"}],
        "category": "greetings",
    },
    {
        "ukrainian_word": "Вибачте",
        "english_translation": "Excuse me / Sorry",
        "pronunciation": "vy-BACH-te",
        "part_of_speech": "interjection",
        "examples": [{"ukrainian": "Вибачте, де магазин?", "english": "Excuse me, where is the store?"}],
        "category": "greetings",
    },
    {
        "ukrainian_word": "Робота",
        "english_translation": "Work / Job",
        "pronunciation": "ro-BO-ta",
        "part_of_speech": "noun",
        "examples": [{"ukrainian": "Я шукаю роботу.", "english": "I am looking for work."}],
        "category": "employment",
    },
]


def seed_storage(storage: MemStorage) -> None:
    """Insert the sample records into ``storage``."""
    for data in HISTORICAL_EVENTS:
        storage.add_historical_event(HistoricalEventCreate(**data))
    for data in LEARNING_MODULES:
        storage.add_learning_module(LearningModuleCreate(**data))
    for data in COMMUNITY_RESOURCES:
        storage.add_community_resource(CommunityResourceCreate(**data))
    for data in DICTIONARY_ENTRIES:
        storage.add_dictionary_entry(DictionaryEntryCreate(**data))
    logger.info(
        "Seeded store: %d historical events, %d learning modules, %d community resources, %d dictionary entries",
        len(HISTORICAL_EVENTS),
        len(LEARNING_MODULES),
        len(COMMUNITY_RESOURCES),
        len(DICTIONARY_ENTRIES),
    )

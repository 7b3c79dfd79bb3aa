#!/usr/bin/env python3
"""
items.py
--------
Junction items: rows of the ``{Base}_{Target}`` tables.

An item links one base row (a movie, a series, an image, a text) to a
target entity and carries the payload of that relation, such as a role,
a character, an award category or a release date.

Usage:
    genres = GenreItem.retrieve_list(reader, "Movie", "_xxx", "Genre")
    directors = PersonItem.retrieve_list(reader, "Movie", "_xxx", "Director")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Optional, Tuple

# --- Local imports ---
from infothek.database.models.base import EntryItem
from infothek.database.models.entities import (
    AspectRatio,
    Award,
    Camera,
    Certification,
    CinematographicProcess,
    Color,
    Company,
    Country,
    Edition,
    FilmFormat,
    Genre,
    Image,
    Laboratory,
    Language,
    Location,
    Person,
    SoundMix,
    Text,
    Weblink,
)


@dataclass
class AspectRatioItem(EntryItem):
    COLUMNS: ClassVar[Dict[str, str]] = {}
    REFERENCES: ClassVar[Dict[str, Tuple[str, str]]] = {
        "AspectRatioID": ("aspect_ratio", "AspectRatio"),
    }

    aspect_ratio: Optional[AspectRatio] = None


@dataclass
class AwardItem(EntryItem):
    """
    Award won or nominated for, with the honoured persons.

    ``persons`` is read from ``{Base}_Award_Person`` and stays None when
    the award names nobody.
    """

    COLUMNS: ClassVar[Dict[str, str]] = {
        "Category": "category",
        "Date": "date",
        "Winner": "winner",
    }
    REFERENCES: ClassVar[Dict[str, Tuple[str, str]]] = {
        "AwardID": ("award", "Award"),
    }
    LISTS: ClassVar[Tuple[Tuple[str, str, str], ...]] = (
        ("persons", "PersonItem", "Person"),
    )

    award: Optional[Award] = None
    category: Optional[str] = None
    date: Optional[str] = None
    winner: Optional[str] = None
    persons: Optional[List["PersonItem"]] = None

    def retrieve_additional_information(self) -> int:
        count = super().retrieve_additional_information()
        if not self.persons:
            self.persons = None
        return count


@dataclass
class CameraItem(EntryItem):
    COLUMNS: ClassVar[Dict[str, str]] = {}
    REFERENCES: ClassVar[Dict[str, Tuple[str, str]]] = {
        "CameraID": ("camera", "Camera"),
    }

    camera: Optional[Camera] = None


@dataclass
class CertificationItem(EntryItem):
    COLUMNS: ClassVar[Dict[str, str]] = {}
    REFERENCES: ClassVar[Dict[str, Tuple[str, str]]] = {
        "CertificationID": ("certification", "Certification"),
    }

    certification: Optional[Certification] = None


@dataclass
class CinematographicProcessItem(EntryItem):
    COLUMNS: ClassVar[Dict[str, str]] = {}
    REFERENCES: ClassVar[Dict[str, Tuple[str, str]]] = {
        "CinematographicProcessID": ("cinematographic_process", "CinematographicProcess"),
    }

    cinematographic_process: Optional[CinematographicProcess] = None


@dataclass
class ColorItem(EntryItem):
    COLUMNS: ClassVar[Dict[str, str]] = {}
    REFERENCES: ClassVar[Dict[str, Tuple[str, str]]] = {
        "ColorID": ("color", "Color"),
    }

    color: Optional[Color] = None


@dataclass
class CompanyItem(EntryItem):
    """Company credited in a role (production, effects, source, ...)."""

    COLUMNS: ClassVar[Dict[str, str]] = {"Role": "role"}
    REFERENCES: ClassVar[Dict[str, Tuple[str, str]]] = {
        "CompanyID": ("company", "Company"),
    }

    company: Optional[Company] = None
    role: Optional[str] = None


@dataclass
class CountryItem(EntryItem):
    COLUMNS: ClassVar[Dict[str, str]] = {}
    REFERENCES: ClassVar[Dict[str, Tuple[str, str]]] = {
        "CountryID": ("country", "Country"),
    }

    country: Optional[Country] = None


@dataclass
class DistributorCompanyItem(CompanyItem):
    """Distributor with the country and date of the release it handled."""

    COLUMNS: ClassVar[Dict[str, str]] = {"ReleaseDate": "release_date"}
    REFERENCES: ClassVar[Dict[str, Tuple[str, str]]] = {
        "CountryID": ("country", "Country"),
    }

    country: Optional[Country] = None
    release_date: Optional[str] = None


@dataclass
class FilmFormatItem(EntryItem):
    COLUMNS: ClassVar[Dict[str, str]] = {}
    REFERENCES: ClassVar[Dict[str, Tuple[str, str]]] = {
        "FilmFormatID": ("film_format", "FilmFormat"),
    }

    film_format: Optional[FilmFormat] = None


@dataclass
class NegativeFormatItem(FilmFormatItem):
    pass


@dataclass
class PrintedFilmFormatItem(FilmFormatItem):
    pass


@dataclass
class FilmLengthItem(EntryItem):
    COLUMNS: ClassVar[Dict[str, str]] = {"Length": "length"}

    length: Optional[str] = None


@dataclass
class GenreItem(EntryItem):
    COLUMNS: ClassVar[Dict[str, str]] = {}
    REFERENCES: ClassVar[Dict[str, Tuple[str, str]]] = {
        "GenreID": ("genre", "Genre"),
    }

    genre: Optional[Genre] = None


@dataclass
class ImageItem(EntryItem):
    COLUMNS: ClassVar[Dict[str, str]] = {}
    REFERENCES: ClassVar[Dict[str, Tuple[str, str]]] = {
        "ImageID": ("image", "Image"),
    }

    image: Optional[Image] = None


@dataclass
class LaboratoryItem(EntryItem):
    COLUMNS: ClassVar[Dict[str, str]] = {}
    REFERENCES: ClassVar[Dict[str, Tuple[str, str]]] = {
        "LaboratoryID": ("laboratory", "Laboratory"),
    }

    laboratory: Optional[Laboratory] = None


@dataclass
class LanguageItem(EntryItem):
    COLUMNS: ClassVar[Dict[str, str]] = {}
    REFERENCES: ClassVar[Dict[str, Tuple[str, str]]] = {
        "LanguageID": ("language", "Language"),
    }

    language: Optional[Language] = None


@dataclass
class LocationItem(EntryItem):
    COLUMNS: ClassVar[Dict[str, str]] = {}
    REFERENCES: ClassVar[Dict[str, Tuple[str, str]]] = {
        "LocationID": ("location", "Location"),
    }

    target_table_name: Optional[str] = "FilmingLocation"
    location: Optional[Location] = None


@dataclass
class PersonItem(EntryItem):
    """Person credited in a role (director, writer, producer, ...)."""

    COLUMNS: ClassVar[Dict[str, str]] = {"Role": "role"}
    REFERENCES: ClassVar[Dict[str, Tuple[str, str]]] = {
        "PersonID": ("person", "Person"),
    }

    person: Optional[Person] = None
    role: Optional[str] = None


@dataclass
class CastPersonItem(PersonItem):
    """
    Actor with the played character and the German dubbing voice.

    Reads ActorID instead of PersonID; ``role`` holds the character.
    """

    COLUMNS: ClassVar[Dict[str, str]] = {"Character": "role"}
    REFERENCES: ClassVar[Dict[str, Tuple[str, str]]] = {
        "ActorID": ("person", "Person"),
        "DubberID": ("dubber", "Person"),
    }

    dubber: Optional[Person] = None

    @classmethod
    def column_map(cls):
        columns, references = super().column_map()
        columns.pop("Role", None)
        references.pop("PersonID", None)
        return columns, references


@dataclass
class RuntimeItem(EntryItem):
    """Runtime in minutes of one edition (theatrical, director's cut, ...)."""

    COLUMNS: ClassVar[Dict[str, str]] = {"Runtime": "runtime"}
    REFERENCES: ClassVar[Dict[str, Tuple[str, str]]] = {
        "EditionID": ("edition", "Edition"),
    }

    runtime: Optional[int] = None
    edition: Optional[Edition] = None

    def _convert(self, attr: str, value: Any) -> Any:
        if attr == "runtime" and value is not None:
            return int(value)
        return super()._convert(attr, value)


@dataclass
class SoundMixItem(EntryItem):
    COLUMNS: ClassVar[Dict[str, str]] = {}
    REFERENCES: ClassVar[Dict[str, Tuple[str, str]]] = {
        "SoundMixID": ("sound_mix", "SoundMix"),
    }

    sound_mix: Optional[SoundMix] = None


@dataclass
class TextItem(EntryItem):
    COLUMNS: ClassVar[Dict[str, str]] = {}
    REFERENCES: ClassVar[Dict[str, Tuple[str, str]]] = {
        "TextID": ("text", "Text"),
    }

    text: Optional[Text] = None


@dataclass
class TimespanItem(EntryItem):
    """Filming or production period."""

    COLUMNS: ClassVar[Dict[str, str]] = {
        "StartDate": "start_date",
        "EndDate": "end_date",
    }

    start_date: Optional[str] = None
    end_date: Optional[str] = None


@dataclass
class WeblinkItem(EntryItem):
    COLUMNS: ClassVar[Dict[str, str]] = {}
    REFERENCES: ClassVar[Dict[str, Tuple[str, str]]] = {
        "WeblinkID": ("weblink", "Weblink"),
    }

    weblink: Optional[Weblink] = None

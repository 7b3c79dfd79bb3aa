#!/usr/bin/env python3
"""
entities.py
-----------
Concrete entities, one per lookup table of the Infothek database.

Each class maps its table's columns onto attributes. Details, StatusID
and LastUpdated are inherited from Entry.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Optional, Tuple

# --- Local imports ---
from infothek.database.models.base import Entry


@dataclass
class Status(Entry):
    """
    Status of an entry (e.g. 'ok', 'in work').

    StatusID stays a plain string here: a status row does not nest
    another Status.
    """

    TABLE: ClassVar[str] = "Status"
    COLUMNS: ClassVar[Dict[str, str]] = {
        "EnglishTitle": "english_title",
        "GermanTitle": "german_title",
        "StatusID": "status_id",
    }

    english_title: Optional[str] = None
    german_title: Optional[str] = None
    status_id: Optional[str] = None


@dataclass
class AspectRatio(Entry):
    TABLE: ClassVar[str] = "AspectRatio"
    COLUMNS: ClassVar[Dict[str, str]] = {"Ratio": "ratio"}

    ratio: Optional[str] = None


@dataclass
class Company(Entry):
    TABLE: ClassVar[str] = "Company"
    COLUMNS: ClassVar[Dict[str, str]] = {"Name": "name", "NameAddOn": "name_add_on"}

    name: Optional[str] = None
    name_add_on: Optional[str] = None

    @property
    def full_name(self) -> str:
        """Name followed by the add-on (e.g. 'Warner Bros. Pictures')."""
        return " ".join(part for part in (self.name, self.name_add_on) if part)


@dataclass
class Award(Entry):
    TABLE: ClassVar[str] = "Award"
    COLUMNS: ClassVar[Dict[str, str]] = {"Name": "name"}
    REFERENCES: ClassVar[Dict[str, Tuple[str, str]]] = {
        "PresenterID": ("presenter", "Company"),
    }

    name: Optional[str] = None
    presenter: Optional[Company] = None


@dataclass
class Camera(Entry):
    TABLE: ClassVar[str] = "Camera"
    COLUMNS: ClassVar[Dict[str, str]] = {"Name": "name", "Lense": "lense"}

    name: Optional[str] = None
    lense: Optional[str] = None


@dataclass
class Country(Entry):
    """Country with short and full names in three languages."""

    TABLE: ClassVar[str] = "Country"
    COLUMNS: ClassVar[Dict[str, str]] = {
        "OriginalShortName": "original_short_name",
        "OriginalFullName": "original_full_name",
        "EnglishShortName": "english_short_name",
        "EnglishFullName": "english_full_name",
        "GermanShortName": "german_short_name",
        "GermanFullName": "german_full_name",
    }

    original_short_name: Optional[str] = None
    original_full_name: Optional[str] = None
    english_short_name: Optional[str] = None
    english_full_name: Optional[str] = None
    german_short_name: Optional[str] = None
    german_full_name: Optional[str] = None


@dataclass
class Type(Entry):
    TABLE: ClassVar[str] = "Type"
    COLUMNS: ClassVar[Dict[str, str]] = {
        "EnglishTitle": "english_title",
        "GermanTitle": "german_title",
    }

    english_title: Optional[str] = None
    german_title: Optional[str] = None


@dataclass
class Image(Entry):
    """
    Image file with description.

    The additional step loads the companies credited as sources
    (``Image_Source``).
    """

    TABLE: ClassVar[str] = "Image"
    COLUMNS: ClassVar[Dict[str, str]] = {
        "FileName": "file_name",
        "Description": "description",
    }
    REFERENCES: ClassVar[Dict[str, Tuple[str, str]]] = {
        "TypeID": ("type", "Type"),
        "CountryID": ("country", "Country"),
    }
    LISTS: ClassVar[Tuple[Tuple[str, str, str], ...]] = (
        ("sources", "CompanyItem", "Source"),
    )

    file_name: Optional[str] = None
    description: Optional[str] = None
    type: Optional[Type] = None
    country: Optional[Country] = None
    sources: List[Any] = field(default_factory=list)


@dataclass
class Certification(Entry):
    TABLE: ClassVar[str] = "Certification"
    COLUMNS: ClassVar[Dict[str, str]] = {"Name": "name"}
    REFERENCES: ClassVar[Dict[str, Tuple[str, str]]] = {
        "ImageID": ("image", "Image"),
        "CountryID": ("country", "Country"),
    }

    name: Optional[str] = None
    image: Optional[Image] = None
    country: Optional[Country] = None


@dataclass
class CinematographicProcess(Entry):
    TABLE: ClassVar[str] = "CinematographicProcess"
    COLUMNS: ClassVar[Dict[str, str]] = {"Name": "name"}

    name: Optional[str] = None


@dataclass
class Color(Entry):
    TABLE: ClassVar[str] = "Color"
    COLUMNS: ClassVar[Dict[str, str]] = {
        "EnglishTitle": "english_title",
        "GermanTitle": "german_title",
    }

    english_title: Optional[str] = None
    german_title: Optional[str] = None


@dataclass
class Connection(Entry):
    """
    Group of related articles (a franchise, a remake chain).

    ``base_connection`` points at the parent group; the root has none.
    """

    TABLE: ClassVar[str] = "Connection"
    COLUMNS: ClassVar[Dict[str, str]] = {"Title": "title"}
    REFERENCES: ClassVar[Dict[str, Tuple[str, str]]] = {
        "ConnectionID": ("base_connection", "Connection"),
    }

    title: Optional[str] = None
    base_connection: Optional["Connection"] = None

    def root(self) -> "Connection":
        """Follow base_connection up to the top-level group."""
        node = self
        seen = {node.id}
        while node.base_connection is not None and node.base_connection.id not in seen:
            node = node.base_connection
            seen.add(node.id)
        return node


@dataclass
class Edition(Entry):
    TABLE: ClassVar[str] = "Edition"
    COLUMNS: ClassVar[Dict[str, str]] = {
        "EnglishTitle": "english_title",
        "GermanTitle": "german_title",
    }

    english_title: Optional[str] = None
    german_title: Optional[str] = None


@dataclass
class FilmFormat(Entry):
    TABLE: ClassVar[str] = "FilmFormat"
    COLUMNS: ClassVar[Dict[str, str]] = {"Format": "format"}

    format: Optional[str] = None


@dataclass
class Genre(Entry):
    TABLE: ClassVar[str] = "Genre"
    COLUMNS: ClassVar[Dict[str, str]] = {
        "EnglishTitle": "english_title",
        "GermanTitle": "german_title",
    }

    english_title: Optional[str] = None
    german_title: Optional[str] = None


@dataclass
class Language(Entry):
    TABLE: ClassVar[str] = "Language"
    COLUMNS: ClassVar[Dict[str, str]] = {
        "OriginalName": "original_name",
        "EnglishName": "english_name",
        "GermanName": "german_name",
    }

    original_name: Optional[str] = None
    english_name: Optional[str] = None
    german_name: Optional[str] = None


@dataclass
class Laboratory(Entry):
    TABLE: ClassVar[str] = "Laboratory"
    COLUMNS: ClassVar[Dict[str, str]] = {"Name": "name"}

    name: Optional[str] = None


@dataclass
class Location(Entry):
    TABLE: ClassVar[str] = "Location"
    COLUMNS: ClassVar[Dict[str, str]] = {"Location": "name"}
    REFERENCES: ClassVar[Dict[str, Tuple[str, str]]] = {
        "CountryID": ("country", "Country"),
    }

    name: Optional[str] = None
    country: Optional[Country] = None


@dataclass
class Person(Entry):
    """
    Cast or crew member.

    ``name`` is derived after retrieval: "First Last", or the last name
    alone for persons known by a single name.
    """

    TABLE: ClassVar[str] = "Person"
    COLUMNS: ClassVar[Dict[str, str]] = {
        "FirstName": "first_name",
        "LastName": "last_name",
        "NameAddOn": "name_add_on",
        "BirthName": "birth_name",
        "DateOfBirth": "date_of_birth",
        "DateOfDeath": "date_of_death",
    }

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    name_add_on: Optional[str] = None
    birth_name: Optional[str] = None
    date_of_birth: Optional[str] = None
    date_of_death: Optional[str] = None
    name: Optional[str] = None

    def _after_retrieve(self) -> None:
        if self.first_name:
            self.name = f"{self.first_name} {self.last_name or ''}".rstrip()
        else:
            self.name = self.last_name


@dataclass
class SoundMix(Entry):
    TABLE: ClassVar[str] = "SoundMix"
    COLUMNS: ClassVar[Dict[str, str]] = {
        "EnglishTitle": "english_title",
        "GermanTitle": "german_title",
    }

    english_title: Optional[str] = None
    german_title: Optional[str] = None


@dataclass
class Text(Entry):
    """Description or review text with its authors and sources."""

    TABLE: ClassVar[str] = "Text"
    COLUMNS: ClassVar[Dict[str, str]] = {"Content": "content"}
    REFERENCES: ClassVar[Dict[str, Tuple[str, str]]] = {
        "LanguageID": ("language", "Language"),
    }
    LISTS: ClassVar[Tuple[Tuple[str, str, str], ...]] = (
        ("authors", "PersonItem", "Author"),
        ("sources", "CompanyItem", "Source"),
    )

    content: Optional[str] = None
    language: Optional[Language] = None
    authors: List[Any] = field(default_factory=list)
    sources: List[Any] = field(default_factory=list)


@dataclass
class Weblink(Entry):
    TABLE: ClassVar[str] = "Weblink"
    COLUMNS: ClassVar[Dict[str, str]] = {
        "URL": "url",
        "EnglishTitle": "english_title",
        "GermanTitle": "german_title",
    }
    REFERENCES: ClassVar[Dict[str, Tuple[str, str]]] = {
        "LanguageID": ("language", "Language"),
    }

    url: Optional[str] = None
    english_title: Optional[str] = None
    german_title: Optional[str] = None
    language: Optional[Language] = None

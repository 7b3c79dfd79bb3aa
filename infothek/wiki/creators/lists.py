#!/usr/bin/env python3
"""
lists.py
--------
Row renderers for the lists an article carries.

Each renderer turns one junction item into the text of a single table
cell. Items whose referenced entry could not be loaded render as None
and are left out of the page.

Info box values:
    genre, certification, country, language, runtime, sound_mix, color,
    aspect_ratio, camera, laboratory, film_length, film_format,
    cinematographic_process

Chapter rows:
    company, distributor, location, timespan, person, cast, image, text,
    award, weblink
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Callable, Iterable, List, Optional

# --- Local imports ---
from infothek.database.models import (
    AwardItem,
    CastPersonItem,
    CompanyItem,
    DistributorCompanyItem,
    ImageItem,
    LocationItem,
    PersonItem,
    TextItem,
    TimespanItem,
    WeblinkItem,
)
from infothek.wiki.formatters import Formatter

from .base import with_details


def render_all(items: Iterable, renderer: Callable[[object], Optional[str]]) -> List[str]:
    """Render every item, dropping the ones that produced nothing."""
    rows = (renderer(item) for item in items or ())
    return [row for row in rows if row is not None]


class ListContentCreator:
    """
    Renders list items for one formatter and language.

    Args:
        formatter: Target markup
        language: Language code; 'en' selects English names, anything
            else German ones
    """

    CERTIFICATION_WIDTH = 75
    IMAGE_WIDTH = 200

    def __init__(self, formatter: Formatter, language: str) -> None:
        self.formatter = formatter
        self.language = language
        self.info_path = [language, "info"]
        self.date_path = [language, "date"]
        self.company_path = [language, "company"]
        self.image_path = [language, "images"]
        self.certification_path = ["certification"]

    @property
    def is_english(self) -> bool:
        return self.language == "en"

    # ---- Links ----
    def info_link(self, pagename: Optional[str], text: Optional[str] = None) -> Optional[str]:
        if not pagename:
            return None
        return self.formatter.as_internal_link(pagename, path=self.info_path, text=text)

    def date_link(self, value: Optional[str]) -> Optional[str]:
        if not value:
            return None
        return self.formatter.as_internal_link(value, path=self.date_path, text=value)

    def titled_link(self, entity) -> Optional[str]:
        """Link to an entity's English page, labelled in the page language."""
        if entity is None:
            return None
        text = entity.english_title if self.is_english else entity.german_title
        return self.info_link(entity.english_title, text or None)

    def country_link(self, country) -> Optional[str]:
        if country is None:
            return None
        short = country.english_short_name if self.is_english else country.german_short_name
        return self.info_link(country.original_full_name, short or None)

    # ---- Info box values ----
    def genre(self, item) -> Optional[str]:
        return self._detailed(item, self.titled_link(item.genre))

    def certification(self, item) -> Optional[str]:
        certification = item.certification
        if certification is None:
            return None
        image = certification.image
        if image is not None and image.file_name:
            value = self.formatter.as_image(
                image.file_name,
                path=self.certification_path,
                width=self.CERTIFICATION_WIDTH,
            )
        else:
            value = certification.name
        return self._detailed(item, value)

    def country(self, item) -> Optional[str]:
        return self._detailed(item, self.country_link(item.country))

    def language_name(self, item) -> Optional[str]:
        language = item.language
        if language is None:
            return None
        name = language.english_name if self.is_english else language.german_name
        return self._detailed(item, self.info_link(language.original_name, name or None))

    def runtime(self, item) -> Optional[str]:
        if item.runtime is None:
            return None
        value = f"{item.runtime} min."
        edition = self.titled_link(item.edition)
        if edition:
            value = f"{value} ({edition})"
        return self._detailed(item, value)

    def sound_mix(self, item) -> Optional[str]:
        return self._detailed(item, self.titled_link(item.sound_mix))

    def color(self, item) -> Optional[str]:
        return self._detailed(item, self.titled_link(item.color))

    def aspect_ratio(self, item) -> Optional[str]:
        ratio = item.aspect_ratio
        return self._detailed(item, ratio.ratio if ratio is not None else None)

    def camera(self, item) -> Optional[str]:
        camera = item.camera
        if camera is None or not camera.name:
            return None
        value = f"{camera.name}, {camera.lense}" if camera.lense else camera.name
        return self._detailed(item, value)

    def laboratory(self, item) -> Optional[str]:
        laboratory = item.laboratory
        return self._detailed(item, laboratory.name if laboratory is not None else None)

    def film_length(self, item) -> Optional[str]:
        return self._detailed(item, item.length)

    def film_format(self, item) -> Optional[str]:
        film_format = item.film_format
        return self._detailed(item, film_format.format if film_format is not None else None)

    def cinematographic_process(self, item) -> Optional[str]:
        process = item.cinematographic_process
        if process is None:
            return None
        return self._detailed(item, self.info_link(process.name, process.name))

    # ---- Chapter rows ----
    def company(self, item: CompanyItem) -> Optional[str]:
        company = item.company
        if company is None or not company.full_name:
            return None
        parts = [self.formatter.as_internal_link(company.full_name, path=self.company_path)]
        if isinstance(item, DistributorCompanyItem):
            release = self.date_link(item.release_date)
            if release:
                parts.append(f"({release})")
            country = self.country_link(item.country)
            if country:
                parts.append(f"({country})")
        if item.role:
            parts.append(f"({item.role})")
        return self._detailed(item, " ".join(parts))

    def location(self, item: LocationItem) -> Optional[str]:
        location = item.location
        if location is None:
            return None
        value = self.info_link(location.name)
        if value is None:
            return None
        country = self.country_link(location.country)
        if country:
            value = f"{value}, {country}"
        return self._detailed(item, value)

    def timespan(self, item: TimespanItem) -> Optional[str]:
        start = self.date_link(item.start_date)
        end = self.date_link(item.end_date)
        if start and end:
            value = f"{start} - {end}"
        else:
            value = start or end
        return self._detailed(item, value)

    def person(self, item: PersonItem) -> Optional[str]:
        person = item.person
        if person is None:
            return None
        value = self.info_link(person.name)
        if value is None:
            return None
        if item.role:
            value = f"{value} ({item.role})"
        if isinstance(item, CastPersonItem) and item.dubber is not None:
            dubber = self.info_link(item.dubber.name)
            if dubber:
                value = f"{value} ({dubber})"
        return self._detailed(item, value)

    def image(self, item: ImageItem) -> Optional[str]:
        image = item.image
        if image is None or not image.file_name:
            return None
        return self.formatter.as_image(
            image.file_name,
            path=self.image_path,
            width=self.IMAGE_WIDTH,
            text=image.description or None,
        )

    def text(self, item: TextItem) -> Optional[str]:
        text = item.text
        if text is None or not text.content:
            return None
        authors = render_all(
            text.authors, lambda author: self.info_link(author.person.name) if author.person else None
        )
        if authors:
            return f"{text.content} ({', '.join(authors)})"
        return text.content

    def award(self, item: AwardItem) -> Optional[str]:
        award = item.award
        if award is None:
            return None
        parts = [self.info_link(award.name)]
        parts.extend(part for part in (item.category, item.date) if part)
        if item.winner:
            parts.append(f"({item.winner})")
        parts = [part for part in parts if part]
        if not parts:
            return None
        return self._detailed(item, " ".join(parts))

    def weblink(self, item: WeblinkItem) -> Optional[str]:
        weblink = item.weblink
        if weblink is None or not weblink.url:
            return None
        title = weblink.english_title if self.is_english else weblink.german_title
        return self.formatter.as_external_link(weblink.url, title or None)

    # ---- Helpers ----
    @staticmethod
    def _detailed(item, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return with_details(value, item.details)

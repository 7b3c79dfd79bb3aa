#!/usr/bin/env python3
"""
article.py
----------
Page creator for movie and series articles.

Builds the comment header, the localized title, the info box and the
chapters (media, cast and crew, companies, production, awards, links
and connections) of a MovieAndTVArticle. Movie and series creators only
differ in their release rows; see movie.py and series.py.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import date
from typing import Callable, List, Optional, Sequence, Tuple

# --- Local imports ---
from infothek.core.exceptions import ArgumentNullError
from infothek.core.logging_manager import InfothekLogger
from infothek.database.models import MovieAndTVArticle
from infothek.wiki.formatters import Formatter

from .base import EntryContentCreator, Label, Lines, label
from .lists import ListContentCreator, render_all

AUTHOR = "WikiPageCreator"

# (attribute, label) per crew section, in page order
CREW_SECTIONS: Tuple[Tuple[str, Label], ...] = (
    ("directors", label("Directors", "Regie")),
    ("writers", label("Writers", "Drehbuch")),
    ("cast", label("Cast", "Darsteller")),
    ("producers", label("Producers", "Produzenten")),
    ("music", label("Music", "Musik")),
    ("cinematography", label("Cinematography", "Kamera")),
    ("film_editing", label("Film Editing", "Schnitt")),
    ("casting", label("Casting", "Casting")),
    ("production_design", label("Production Design", "Szenenbild")),
    ("art_direction", label("Art Direction", "Ausstattung")),
    ("set_decoration", label("Set Decoration", "Bühnenbild")),
    ("costume_design", label("Costume Design", "Kostümbild")),
    ("makeup_department", label("Makeup Department", "Maske")),
    ("production_management", label("Production Management", "Produktionsleitung")),
    ("assistant_directors", label("Second Unit Director or Assistant Director", "Regieassistenz")),
    ("art_department", label("Art Department", "Ausstattungsabteilung")),
    ("sound_department", label("Sound Department", "Tonabteilung")),
    ("special_effects", label("Special Effects", "Spezialeffekte")),
    ("visual_effects", label("Visual Effects", "Visuelle Effekte")),
    ("stunts", label("Stunts", "Stunts")),
    ("electrical_department", label("Camera and Electrical Department", "Kamera und Beleuchtung")),
    ("animation_department", label("Animation Department", "Animation")),
    ("casting_department", label("Casting Department", "Besetzungsabteilung")),
    ("costume_department", label("Costume and Wardrobe Department", "Kostümabteilung")),
    ("editorial_department", label("Editorial Department", "Schnittabteilung")),
    ("location_management", label("Location Management", "Drehortverwaltung")),
    ("music_department", label("Music Department", "Musikabteilung")),
    ("continuity_department", label("Script and Continuity Department", "Drehbuch und Continuity")),
    ("transportation_department", label("Transportation Department", "Fahrdienst")),
    ("other_crew", label("Additional Crew", "Weitere Mitwirkende")),
    ("thanks", label("Thanks", "Dank")),
)

COMPANY_SECTIONS: Tuple[Tuple[str, Label], ...] = (
    ("production_companies", label("Production Companies", "Produktionsfirmen")),
    ("distributors", label("Distributors", "Vertrieb")),
    ("special_effects_companies", label("Special Effects Companies", "Firmen für Spezialeffekte")),
    ("other_companies", label("Additional Companies", "Weitere Firmen")),
)

PRODUCTION_SECTIONS: Tuple[Tuple[str, Label], ...] = (
    ("filming_locations", label("Filming Locations", "Drehorte")),
    ("filming_dates", label("Filming Dates", "Drehdaten")),
    ("production_dates", label("Production Dates", "Produktionsdaten")),
)

LABELS = {
    "title": label("Original Title", "Originaltitel"),
    "type": label("Type", "Typ"),
    "release_date": label("Original Release Date", "Erstausstrahlung"),
    "genre": label("Genre", "Genre"),
    "certification": label("Certification", "Altersfreigabe"),
    "country": label("Production Country", "Produktionsland"),
    "language": label("Language", "Sprache"),
    "budget": label("Budget", "Budget"),
    "gross": label("Worldwide Gross", "Einspielergebnis (weltweit)"),
    "runtime": label("Runtime", "Laufzeit"),
    "sound_mix": label("SoundMix", "Tonmischung"),
    "color": label("Color", "Farbe"),
    "aspect_ratio": label("Aspect Ratio", "Bildformat"),
    "camera": label("Camera", "Kamera"),
    "laboratory": label("Laboratory", "Labor"),
    "film_length": label("Film Length", "Filmlänge"),
    "negative_format": label("Negative Format", "Negativformat"),
    "cinematographic_process": label("Cinematographic Process", "Filmprozess"),
    "printed_film_format": label("Printed Film Format", "Filmformat"),
}

CHAPTERS = {
    "posters": label("Poster", "Poster"),
    "covers": label("Cover", "Cover"),
    "descriptions": label("Descriptions", "Beschreibungen"),
    "reviews": label("Reviews", "Rezensionen"),
    "images": label("Images", "Bilder"),
    "crew": label("Cast and Crew", "Darsteller und Mannschaft"),
    "companies": label("Company Credits", "Beteiligte Firmen"),
    "production": label("Filming and Production", "Produktion"),
    "awards": label("Awards", "Auszeichnungen"),
    "weblinks": label("Other Sites", "Andere Webseiten"),
    "connection": label("Connections to other articles", "Bezüge zu anderen Artikeln"),
}


class ArticleContentCreator(EntryContentCreator):
    """
    Creates the page of a movie or series.

    The entry must have been retrieved with its lists
    (``retrieve(basic_only=False)``); empty lists simply leave out their
    rows, sections or chapters.

    Attributes:
        lists: Row renderers bound to the same formatter and language
        today: Date written into the page header
    """

    entry: MovieAndTVArticle

    def __init__(
        self,
        entry: MovieAndTVArticle,
        formatter: Formatter,
        language: str,
        logger: Optional[InfothekLogger] = None,
        today: Optional[date] = None,
    ) -> None:
        super().__init__(entry, formatter, language, logger)
        self.lists = ListContentCreator(formatter, language)
        self.today = today or date.today()

    def get_page_name(self) -> str:
        """File name of the page, e.g. 'star_wars_1977.txt' for DokuWiki."""
        if not self.entry.original_title:
            raise ArgumentNullError("original_title")
        year = (self.entry.release_date or "")[:4]
        return self.formatter.as_filename(f"{self.entry.original_title} ({year})")

    # ---- Header and title ----
    def create_page_header(self) -> Lines:
        entry = self.entry
        status = ""
        if entry.status is not None:
            status = entry.status.english_title or entry.status.id or ""
        return [
            self.formatter.disable_cache(),
            self.formatter.disable_toc(),
            self.formatter.begin_comment(),
            f"   {entry.original_title}",
            "",
            f"   @author  {AUTHOR}",
            f"   @date    {self.today:%Y-%m-%d}",
            f"   @version {status}: {entry.last_updated or ''}",
            self.formatter.end_comment(),
            "",
            "",
        ]

    def create_page_title(self) -> Lines:
        title = self.localized_title(self.entry) or self.entry.original_title
        return [self.formatter.as_heading1(title), ""]

    # ---- Info box ----
    def create_info_box_content(self) -> Lines:
        entry = self.entry
        lists = self.lists
        content: Lines = []

        content.extend(self.info_box_rows(LABELS["title"], _present(entry.original_title)))
        content.extend(self.info_box_rows(LABELS["type"], _present(lists.titled_link(entry.type))))
        content.extend(self.create_release_rows())
        content.extend(self._list_rows("genre", entry.genres, lists.genre))
        content.extend(self._list_rows("certification", entry.certifications, lists.certification))
        content.extend(self._list_rows("country", entry.countries, lists.country))
        content.extend(self._list_rows("language", entry.languages, lists.language_name))
        content.extend(self.create_episode_rows())
        content.extend(self.info_box_rows(LABELS["budget"], _present(entry.budget)))
        content.extend(self.info_box_rows(LABELS["gross"], _present(self._gross())))
        content.extend(self._list_rows("runtime", entry.runtimes, lists.runtime))
        content.extend(self._list_rows("sound_mix", entry.sound_mixes, lists.sound_mix))
        content.extend(self._list_rows("color", entry.colors, lists.color))
        content.extend(self._list_rows("aspect_ratio", entry.aspect_ratios, lists.aspect_ratio))
        content.extend(self._list_rows("camera", entry.cameras, lists.camera))
        content.extend(self._list_rows("laboratory", entry.laboratories, lists.laboratory))
        content.extend(self._list_rows("film_length", entry.film_lengths, lists.film_length))
        content.extend(self._list_rows("negative_format", entry.negative_formats, lists.film_format))
        content.extend(
            self._list_rows(
                "cinematographic_process",
                entry.cinematographic_processes,
                lists.cinematographic_process,
            )
        )
        content.extend(
            self._list_rows("printed_film_format", entry.printed_film_formats, lists.film_format)
        )
        return content

    def create_release_rows(self) -> Lines:
        return self.info_box_rows(
            LABELS["release_date"], _present(self.lists.date_link(self.entry.release_date))
        )

    def create_episode_rows(self) -> Lines:
        return []

    def _gross(self) -> Optional[str]:
        gross = self.entry.worldwide_gross
        if not gross:
            return None
        gross_date = self.lists.date_link(self.entry.worldwide_gross_date)
        return f"{gross} ({gross_date})" if gross_date else gross

    def _list_rows(self, key: str, items: Sequence, renderer: Callable) -> Lines:
        return self.info_box_rows(LABELS[key], render_all(items, renderer))

    # ---- Chapters ----
    def create_chapter_content(self) -> Lines:
        entry = self.entry
        lists = self.lists
        return self.chapters(
            [
                (CHAPTERS["posters"], self._block(entry.posters, lists.image)),
                (CHAPTERS["covers"], self._block(entry.covers, lists.image)),
                (CHAPTERS["descriptions"], self._block(entry.descriptions, lists.text)),
                (CHAPTERS["reviews"], self._block(entry.reviews, lists.text)),
                (CHAPTERS["images"], self._block(entry.images, lists.image)),
                (CHAPTERS["crew"], self._sections(CREW_SECTIONS, lists.person)),
                (CHAPTERS["companies"], self._sections(COMPANY_SECTIONS, lists.company)),
                (CHAPTERS["production"], self._production_sections()),
                (CHAPTERS["awards"], self._block(entry.awards, lists.award)),
                (CHAPTERS["weblinks"], self._block(entry.weblinks, lists.weblink)),
                (CHAPTERS["connection"], self.create_connection_content()),
            ]
        )

    def create_connection_content(self) -> Lines:
        connection = self.entry.connection
        if connection is None:
            return []
        root = connection.root()
        return [
            self.formatter.as_insert_page(root.id, path=[self.language, "navigation"]),
            "",
            "",
        ]

    def _block(self, items: Sequence, renderer: Callable) -> Lines:
        rows = render_all(items, renderer)
        return self.table_block(rows) if rows else []

    def _section(self, title: Label, items: Sequence, renderer: Callable) -> Lines:
        rows = render_all(items, renderer)
        if not rows:
            return []
        return self.create_section_heading(title) + self.table_block(rows)

    def _sections(self, sections: Sequence[Tuple[str, Label]], renderer: Callable) -> Lines:
        content: Lines = []
        for attr, title in sections:
            content.extend(self._section(title, getattr(self.entry, attr), renderer))
        return content

    def _production_sections(self) -> Lines:
        entry = self.entry
        titles = dict(PRODUCTION_SECTIONS)
        content: Lines = []
        content.extend(
            self._section(titles["filming_locations"], entry.filming_locations, self.lists.location)
        )
        content.extend(
            self._section(titles["filming_dates"], entry.filming_dates, self.lists.timespan)
        )
        content.extend(
            self._section(titles["production_dates"], entry.production_dates, self.lists.timespan)
        )
        return content


def _present(value: Optional[str]) -> List[str]:
    """Single-value row list, empty when the value is missing."""
    return [value] if value else []


__all__ = ["ArticleContentCreator"]

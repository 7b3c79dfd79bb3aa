#!/usr/bin/env python3
"""
base.py
-------
Base classes for the read-only entity layer.

Every entity mirrors one table of the Infothek database. A subclass only
declares its table and the column-to-attribute mapping; the SELECT, the
copy into attributes, the cascade into referenced entities and the
loading of child lists all happen here.

Classes:
    Entry: Base retrievable record (ID, Details, Status, LastUpdated)
    EntryItem: Junction row of a ``{Base}_{Target}`` table
    Article: Movie/series level record with titles and release date
    MovieAndTVArticle: Article with the lists shared by Movie and Series

Declaring an entity:

    @dataclass
    class Genre(Entry):
        TABLE: ClassVar[str] = "Genre"
        COLUMNS: ClassVar[Dict[str, str]] = {
            "EnglishTitle": "english_title",
            "GermanTitle": "german_title",
        }

        english_title: Optional[str] = None
        german_title: Optional[str] = None

References to other entities are declared as
``REFERENCES = {"CountryID": ("country", "Country")}``; the class name is
resolved through the registry filled by ``__init_subclass__``. Child lists
are declared as ``LISTS = (("genres", "GenreItem", "Genre"), ...)`` and are
read from ``{table}_{target}`` junction tables.

A row that does not exist is not an error: retrieval returns 0 and leaves
the attributes at their defaults.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from typing import (
    Any,
    ClassVar,
    Dict,
    List,
    Optional,
    Tuple,
    Type,
    TypeVar,
    TYPE_CHECKING,
)

# --- Local imports ---
from infothek.core.exceptions import ArgumentNullError, MissingIdError
from infothek.core.logging_manager import InfothekLogger, safe_logger

if TYPE_CHECKING:
    from infothek.database.reader import DBReader
    from infothek.database.models.entities import Connection, Status, Type as EntryType
    from infothek.database.models.items import CertificationItem, GenreItem

Chain = Tuple[Tuple[str, str], ...]
E = TypeVar("E", bound="Entry")

_REGISTRY: Dict[str, Type["Entry"]] = {}


def resolve(name: str) -> Type["Entry"]:
    """Look up an entity or item class by name."""
    try:
        return _REGISTRY[name]
    except KeyError:
        raise LookupError(f"Unknown entity class: {name}") from None


def registered_classes() -> Dict[str, Type["Entry"]]:
    return dict(_REGISTRY)


@dataclass
class Entry:
    """
    Base retrievable record.

    Attributes:
        reader: DBReader used for every query of this entry
        id: Primary key value ("" by default)
        details: Free-form details column
        status: Nested Status entity
        last_updated: LastUpdated column
    """

    TABLE: ClassVar[str] = ""
    COLUMNS: ClassVar[Dict[str, str]] = {
        "Details": "details",
        "LastUpdated": "last_updated",
    }
    REFERENCES: ClassVar[Dict[str, Tuple[str, str]]] = {
        "StatusID": ("status", "Status"),
    }
    LISTS: ClassVar[Tuple[Tuple[str, str, str], ...]] = ()

    reader: "DBReader"
    id: Optional[str] = ""
    details: Optional[str] = None
    status: Optional["Status"] = None
    last_updated: Optional[str] = None

    # (table, id) of every entry above this one in a nested retrieval
    _chain: Chain = field(default=(), init=False, repr=False, compare=False)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        _REGISTRY[cls.__name__] = cls

    def __post_init__(self) -> None:
        if self.reader is None:
            raise ArgumentNullError("reader")
        if self.id is None:
            raise ArgumentNullError("id")

    # ---- Declarations ----
    @classmethod
    def column_map(cls) -> Tuple[Dict[str, str], Dict[str, Tuple[str, str]]]:
        """
        Merge COLUMNS and REFERENCES along the class hierarchy.

        A column a subclass maps as a plain value wins over an inherited
        reference on the same column (Status keeps StatusID as text).

        Returns:
            (scalar columns, reference columns)
        """
        columns: Dict[str, str] = {}
        references: Dict[str, Tuple[str, str]] = {}
        for klass in reversed(cls.__mro__):
            columns.update(vars(klass).get("COLUMNS", {}))
            references.update(vars(klass).get("REFERENCES", {}))
        for name in columns:
            references.pop(name, None)
        return columns, references

    @property
    def table_name(self) -> str:
        return self.TABLE

    @property
    def logger(self) -> InfothekLogger:
        return safe_logger(getattr(self.reader, "logger", None))

    # ---- Retrieval ----
    def retrieve(self, basic_only: bool = False) -> int:
        """
        Retrieve this entry from the database.

        The basic step always runs. Child lists are loaded only when
        ``basic_only`` is False and the row exists.

        Args:
            basic_only: Skip child lists, here and in nested entities

        Returns:
            1 if the row was found, 0 otherwise
        """
        found = self.retrieve_basic_information(basic_only)
        if not basic_only and found:
            count = self.retrieve_additional_information()
            self.logger.log_debug(
                f"Retrieved additional information for {self.table_name}",
                {"id": self.id, "child_rows": count},
            )
        return found

    def retrieve_basic_information(self, basic_only: bool = False) -> int:
        """
        Read this entry's own row and cascade into referenced entries.

        Returns:
            1 if exactly one row matched, 0 otherwise

        Raises:
            MissingIdError: If the id was set to None after construction
            DatabaseError: On backend failure
        """
        if self.id is None:
            raise MissingIdError(f"{type(self).__name__} has no id to retrieve")

        columns, references = self.column_map()
        rows = self.reader.fetch_by_id(
            self.table_name, ["ID", *columns, *references], self.id
        )
        if len(rows) != 1:
            self.logger.log_debug(
                f"No row in {self.table_name}", {"id": self.id, "rows": len(rows)}
            )
            return 0

        row = rows[0]
        self.id = str(row["ID"])
        for name, attr in columns.items():
            setattr(self, attr, self._convert(attr, row[name]))

        chain = self._chain + ((self.table_name, self.id),)
        for name, (attr, class_name) in references.items():
            ref_id = row[name]
            if ref_id is None or str(ref_id) == "":
                continue
            setattr(self, attr, self._retrieve_reference(class_name, str(ref_id), basic_only, chain))

        self._after_retrieve()
        return 1

    def retrieve_additional_information(self) -> int:
        """
        Load the declared child lists.

        Returns:
            Number of child rows loaded (0 for entries without lists)
        """
        count = 0
        for attr, item_class, target in self.LISTS:
            items = self._load_list(resolve(item_class), target)
            setattr(self, attr, items)
            count += len(items)
        return count

    @classmethod
    def fetch(
        cls: Type[E], reader: "DBReader", entry_id: str, basic_only: bool = False
    ) -> Tuple[E, bool]:
        """
        Construct and retrieve an entry in one call.

        Returns:
            (entry, found) where found tells whether the row exists
        """
        entry = cls(reader, entry_id)
        return entry, entry.retrieve(basic_only) == 1

    # ---- Hooks and helpers ----
    def _convert(self, attr: str, value: Any) -> Any:
        if value is None:
            return None
        return str(value)

    def _after_retrieve(self) -> None:
        pass

    def _retrieve_reference(
        self, class_name: str, ref_id: str, basic_only: bool, chain: Chain
    ) -> Optional["Entry"]:
        ref_cls = resolve(class_name)
        if (ref_cls.TABLE, ref_id) in chain:
            self.logger.log_warning(
                "Reference cycle detected, not retrieving again",
                {"table": ref_cls.TABLE, "id": ref_id, "from": self.table_name},
            )
            return None

        ref = ref_cls(self.reader.new(), ref_id)
        ref._chain = chain
        ref.retrieve(basic_only)
        return ref

    def _load_list(
        self, item_cls: Type["EntryItem"], target: str, order: str = "ID"
    ) -> List["EntryItem"]:
        chain = self._chain + ((self.table_name, self.id),)
        return item_cls._retrieve_list(
            self.reader, self.table_name, self.id, target, order, chain
        )


@dataclass
class EntryItem(Entry):
    """
    Row of a ``{Base}_{Target}`` junction table.

    Attributes:
        base_table_name: Table of the owning entry (e.g. 'Movie')
        target_table_name: Relation name (e.g. 'Genre', 'Director')
    """

    base_table_name: Optional[str] = ""
    target_table_name: Optional[str] = ""

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.base_table_name is None:
            raise ArgumentNullError("base_table_name")
        if self.target_table_name is None:
            raise ArgumentNullError("target_table_name")

    @property
    def table_name(self) -> str:
        return f"{self.base_table_name}_{self.target_table_name}"

    @classmethod
    def retrieve_list(
        cls: Type[E],
        reader: "DBReader",
        base_table_name: str,
        base_id: str,
        target_table_name: str,
        order: str = "ID",
    ) -> List[E]:
        """
        Retrieve every item linked to one base entry.

        Runs ``SELECT ID FROM {base}_{target} WHERE {base}ID = :base_id
        ORDER BY {order}`` and fully retrieves each item.

        Args:
            reader: DBReader to query with
            base_table_name: Owning table (e.g. 'Movie')
            base_id: Id of the owning row
            target_table_name: Relation name (e.g. 'Genre')
            order: Sort column

        Returns:
            Retrieved items in order, empty if nothing matched

        Raises:
            ArgumentNullError: If any argument is None or empty
        """
        return cls._retrieve_list(
            reader, base_table_name, base_id, target_table_name, order, ()
        )

    @classmethod
    def _retrieve_list(
        cls,
        reader: "DBReader",
        base_table_name: str,
        base_id: str,
        target_table_name: str,
        order: str,
        chain: Chain,
    ) -> List["EntryItem"]:
        arguments = {
            "reader": reader,
            "base_table_name": base_table_name,
            "base_id": base_id,
            "target_table_name": target_table_name,
            "order": order,
        }
        for name, value in arguments.items():
            if value is None or (isinstance(value, str) and value == ""):
                raise ArgumentNullError(name)

        ids = reader.fetch_ids(
            f"{base_table_name}_{target_table_name}",
            f"{base_table_name}ID",
            base_id,
            order,
        )

        items: List[EntryItem] = []
        for item_id in ids:
            item = cls(
                reader.new(),
                item_id,
                base_table_name=base_table_name,
                target_table_name=target_table_name,
            )
            item._chain = chain
            item.retrieve(False)
            items.append(item)
        return items


@dataclass
class Article(Entry):
    """
    Movie/series level record.

    Attributes:
        original_title: Title in the original language
        english_title: English title
        german_title: German title
        type: Nested Type entity
        release_date: Release date (ISO text)
        genres: GenreItem list
        certifications: CertificationItem list
        connection: Nested Connection entity
    """

    COLUMNS: ClassVar[Dict[str, str]] = {
        "OriginalTitle": "original_title",
        "EnglishTitle": "english_title",
        "GermanTitle": "german_title",
        "ReleaseDate": "release_date",
    }
    REFERENCES: ClassVar[Dict[str, Tuple[str, str]]] = {
        "TypeID": ("type", "Type"),
        "ConnectionID": ("connection", "Connection"),
    }

    original_title: Optional[str] = None
    english_title: Optional[str] = None
    german_title: Optional[str] = None
    type: Optional["EntryType"] = None
    release_date: Optional[str] = None
    genres: List["GenreItem"] = field(default_factory=list)
    certifications: List["CertificationItem"] = field(default_factory=list)
    connection: Optional["Connection"] = None

    @classmethod
    def retrieve_list(
        cls: Type[E], reader: "DBReader", status: str, order: str = "ID"
    ) -> List[E]:
        """
        Retrieve the basic information of every article with a status.

        Args:
            reader: DBReader to query with
            status: StatusID to filter on (e.g. 'ok')
            order: Sort column

        Returns:
            Articles retrieved with basic_only=True, in order

        Raises:
            ArgumentNullError: If reader or status is None or empty
        """
        if reader is None:
            raise ArgumentNullError("reader")
        if not status:
            raise ArgumentNullError("status")
        if not order:
            raise ArgumentNullError("order")

        articles = []
        for article_id in reader.fetch_ids(cls.TABLE, "StatusID", status, order):
            article = cls(reader.new(), article_id)
            article.retrieve(True)
            articles.append(article)
        return articles


# Lists shared by Movie and Series, in page order: (attribute, item class, target)
INFOBOX_LISTS: Tuple[Tuple[str, str, str], ...] = (
    ("genres", "GenreItem", "Genre"),
    ("certifications", "CertificationItem", "Certification"),
    ("countries", "CountryItem", "Country"),
    ("languages", "LanguageItem", "Language"),
    ("runtimes", "RuntimeItem", "Runtime"),
    ("sound_mixes", "SoundMixItem", "SoundMix"),
    ("colors", "ColorItem", "Color"),
    ("aspect_ratios", "AspectRatioItem", "AspectRatio"),
    ("cameras", "CameraItem", "Camera"),
    ("laboratories", "LaboratoryItem", "Laboratory"),
    ("film_lengths", "FilmLengthItem", "FilmLength"),
    ("negative_formats", "NegativeFormatItem", "NegativeFormat"),
    ("cinematographic_processes", "CinematographicProcessItem", "CinematographicProcess"),
    ("printed_film_formats", "PrintedFilmFormatItem", "PrintedFilmFormat"),
)

CREW_LISTS: Tuple[Tuple[str, str, str], ...] = (
    ("directors", "PersonItem", "Director"),
    ("writers", "PersonItem", "Writer"),
    ("cast", "CastPersonItem", "Cast"),
    ("producers", "PersonItem", "Producer"),
    ("music", "PersonItem", "Music"),
    ("cinematography", "PersonItem", "Cinematography"),
    ("film_editing", "PersonItem", "FilmEditing"),
    ("casting", "PersonItem", "Casting"),
    ("production_design", "PersonItem", "ProductionDesign"),
    ("art_direction", "PersonItem", "ArtDirection"),
    ("set_decoration", "PersonItem", "SetDecoration"),
    ("costume_design", "PersonItem", "CostumeDesign"),
    ("makeup_department", "PersonItem", "MakeupDepartment"),
    ("production_management", "PersonItem", "ProductionManagement"),
    ("assistant_directors", "PersonItem", "AssistantDirector"),
    ("art_department", "PersonItem", "ArtDepartment"),
    ("sound_department", "PersonItem", "SoundDepartment"),
    ("special_effects", "PersonItem", "SpecialEffects"),
    ("visual_effects", "PersonItem", "VisualEffects"),
    ("stunts", "PersonItem", "Stunts"),
    ("electrical_department", "PersonItem", "ElectricalDepartment"),
    ("animation_department", "PersonItem", "AnimationDepartment"),
    ("casting_department", "PersonItem", "CastingDepartment"),
    ("costume_department", "PersonItem", "CostumeDepartment"),
    ("editorial_department", "PersonItem", "EditorialDepartment"),
    ("location_management", "PersonItem", "LocationManagement"),
    ("music_department", "PersonItem", "MusicDepartment"),
    ("continuity_department", "PersonItem", "ContinuityDepartment"),
    ("transportation_department", "PersonItem", "TransportationDepartment"),
    ("other_crew", "PersonItem", "OtherCrew"),
    ("thanks", "PersonItem", "Thanks"),
)

COMPANY_LISTS: Tuple[Tuple[str, str, str], ...] = (
    ("production_companies", "CompanyItem", "ProductionCompany"),
    ("distributors", "DistributorCompanyItem", "Distributor"),
    ("special_effects_companies", "CompanyItem", "SpecialEffectsCompany"),
    ("other_companies", "CompanyItem", "OtherCompany"),
)

PRODUCTION_LISTS: Tuple[Tuple[str, str, str], ...] = (
    ("filming_locations", "LocationItem", "FilmingLocation"),
    ("filming_dates", "TimespanItem", "FilmingDate"),
    ("production_dates", "TimespanItem", "ProductionDate"),
)

MEDIA_LISTS: Tuple[Tuple[str, str, str], ...] = (
    ("posters", "ImageItem", "Poster"),
    ("covers", "ImageItem", "Cover"),
    ("images", "ImageItem", "Image"),
    ("descriptions", "TextItem", "Description"),
    ("reviews", "TextItem", "Review"),
    ("awards", "AwardItem", "Award"),
    ("weblinks", "WeblinkItem", "Weblink"),
)


@dataclass
class MovieAndTVArticle(Article):
    """Article with the financial, technical and credit lists of Movie and Series."""

    COLUMNS: ClassVar[Dict[str, str]] = {
        "Budget": "budget",
        "WorldwideGross": "worldwide_gross",
        "WorldwideGrossDate": "worldwide_gross_date",
    }
    REFERENCES: ClassVar[Dict[str, Tuple[str, str]]] = {
        "CastStatusID": ("cast_status", "Status"),
        "CrewStatusID": ("crew_status", "Status"),
    }
    LISTS: ClassVar[Tuple[Tuple[str, str, str], ...]] = (
        INFOBOX_LISTS + CREW_LISTS + COMPANY_LISTS + PRODUCTION_LISTS + MEDIA_LISTS
    )

    budget: Optional[str] = None
    worldwide_gross: Optional[str] = None
    worldwide_gross_date: Optional[str] = None
    cast_status: Optional["Status"] = None
    crew_status: Optional["Status"] = None

    countries: List[Any] = field(default_factory=list)
    languages: List[Any] = field(default_factory=list)
    runtimes: List[Any] = field(default_factory=list)
    sound_mixes: List[Any] = field(default_factory=list)
    colors: List[Any] = field(default_factory=list)
    aspect_ratios: List[Any] = field(default_factory=list)
    cameras: List[Any] = field(default_factory=list)
    laboratories: List[Any] = field(default_factory=list)
    film_lengths: List[Any] = field(default_factory=list)
    negative_formats: List[Any] = field(default_factory=list)
    cinematographic_processes: List[Any] = field(default_factory=list)
    printed_film_formats: List[Any] = field(default_factory=list)

    directors: List[Any] = field(default_factory=list)
    writers: List[Any] = field(default_factory=list)
    cast: List[Any] = field(default_factory=list)
    producers: List[Any] = field(default_factory=list)
    music: List[Any] = field(default_factory=list)
    cinematography: List[Any] = field(default_factory=list)
    film_editing: List[Any] = field(default_factory=list)
    casting: List[Any] = field(default_factory=list)
    production_design: List[Any] = field(default_factory=list)
    art_direction: List[Any] = field(default_factory=list)
    set_decoration: List[Any] = field(default_factory=list)
    costume_design: List[Any] = field(default_factory=list)
    makeup_department: List[Any] = field(default_factory=list)
    production_management: List[Any] = field(default_factory=list)
    assistant_directors: List[Any] = field(default_factory=list)
    art_department: List[Any] = field(default_factory=list)
    sound_department: List[Any] = field(default_factory=list)
    special_effects: List[Any] = field(default_factory=list)
    visual_effects: List[Any] = field(default_factory=list)
    stunts: List[Any] = field(default_factory=list)
    electrical_department: List[Any] = field(default_factory=list)
    animation_department: List[Any] = field(default_factory=list)
    casting_department: List[Any] = field(default_factory=list)
    costume_department: List[Any] = field(default_factory=list)
    editorial_department: List[Any] = field(default_factory=list)
    location_management: List[Any] = field(default_factory=list)
    music_department: List[Any] = field(default_factory=list)
    continuity_department: List[Any] = field(default_factory=list)
    transportation_department: List[Any] = field(default_factory=list)
    other_crew: List[Any] = field(default_factory=list)
    thanks: List[Any] = field(default_factory=list)

    production_companies: List[Any] = field(default_factory=list)
    distributors: List[Any] = field(default_factory=list)
    special_effects_companies: List[Any] = field(default_factory=list)
    other_companies: List[Any] = field(default_factory=list)

    filming_locations: List[Any] = field(default_factory=list)
    filming_dates: List[Any] = field(default_factory=list)
    production_dates: List[Any] = field(default_factory=list)

    posters: List[Any] = field(default_factory=list)
    covers: List[Any] = field(default_factory=list)
    images: List[Any] = field(default_factory=list)
    descriptions: List[Any] = field(default_factory=list)
    reviews: List[Any] = field(default_factory=list)
    awards: List[Any] = field(default_factory=list)
    weblinks: List[Any] = field(default_factory=list)

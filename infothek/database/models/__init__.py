"""
Entity classes of the Infothek database.

Importing this package registers every entity and item class, so
references declared by name resolve.
"""
from infothek.database.models.base import (
    Article,
    Entry,
    EntryItem,
    MovieAndTVArticle,
    registered_classes,
    resolve,
)
from infothek.database.models.entities import (
    AspectRatio,
    Award,
    Camera,
    Certification,
    CinematographicProcess,
    Color,
    Company,
    Connection,
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
    Status,
    Text,
    Type,
    Weblink,
)
from infothek.database.models.items import (
    AspectRatioItem,
    AwardItem,
    CameraItem,
    CastPersonItem,
    CertificationItem,
    CinematographicProcessItem,
    ColorItem,
    CompanyItem,
    CountryItem,
    DistributorCompanyItem,
    FilmFormatItem,
    FilmLengthItem,
    GenreItem,
    ImageItem,
    LaboratoryItem,
    LanguageItem,
    LocationItem,
    NegativeFormatItem,
    PersonItem,
    PrintedFilmFormatItem,
    RuntimeItem,
    SoundMixItem,
    TextItem,
    TimespanItem,
    WeblinkItem,
)
from infothek.database.models.articles import ARTICLE_KINDS, Movie, Series

__all__ = [
    "ARTICLE_KINDS",
    "Article",
    "AspectRatio",
    "AspectRatioItem",
    "Award",
    "AwardItem",
    "Camera",
    "CameraItem",
    "CastPersonItem",
    "Certification",
    "CertificationItem",
    "CinematographicProcess",
    "CinematographicProcessItem",
    "Color",
    "ColorItem",
    "Company",
    "CompanyItem",
    "Connection",
    "Country",
    "CountryItem",
    "DistributorCompanyItem",
    "Edition",
    "Entry",
    "EntryItem",
    "FilmFormat",
    "FilmFormatItem",
    "FilmLengthItem",
    "Genre",
    "GenreItem",
    "Image",
    "ImageItem",
    "Laboratory",
    "LaboratoryItem",
    "Language",
    "LanguageItem",
    "Location",
    "LocationItem",
    "Movie",
    "MovieAndTVArticle",
    "NegativeFormatItem",
    "Person",
    "PersonItem",
    "PrintedFilmFormatItem",
    "RuntimeItem",
    "Series",
    "SoundMix",
    "SoundMixItem",
    "Status",
    "Text",
    "TextItem",
    "TimespanItem",
    "Type",
    "Weblink",
    "WeblinkItem",
    "registered_classes",
    "resolve",
]

"""
conftest.py
-----------
Shared pytest fixtures for Infothek tests.

Provides fixtures for:
- A temporary SQLite database built from infothek.database.schema
- A DBReader over that database
- A mocked InfothekLogger
"""
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine

from infothek.core.logging_manager import InfothekLogger
from infothek.database.reader import DBReader
from infothek.database.schema import metadata


# ----- Fixture rows -----
# table name -> rows; columns left out are NULL

FIXTURE_ROWS = {
    "Status": [
        {"ID": "ok", "EnglishTitle": "Finished", "GermanTitle": "Fertig"},
        {"ID": "wip", "EnglishTitle": "In Work", "GermanTitle": "In Arbeit"},
    ],
    "Type": [
        {"ID": "_mv", "EnglishTitle": "Movie", "GermanTitle": "Film"},
    ],
    "Genre": [
        {"ID": "_g1", "EnglishTitle": "Science Fiction", "GermanTitle": "Science-Fiction"},
        {"ID": "_g2", "EnglishTitle": "Horror", "GermanTitle": "Horror"},
    ],
    "Country": [
        {
            "ID": "_us",
            "OriginalShortName": "USA",
            "OriginalFullName": "United States of America",
            "EnglishShortName": "USA",
            "EnglishFullName": "United States of America",
            "GermanShortName": "USA",
            "GermanFullName": "Vereinigte Staaten von Amerika",
        },
    ],
    "Language": [
        {"ID": "_en", "OriginalName": "English", "EnglishName": "English", "GermanName": "Englisch"},
    ],
    "Edition": [
        {"ID": "_th", "EnglishTitle": "Theatrical Version", "GermanTitle": "Kinofassung"},
    ],
    "Person": [
        {"ID": "_p1", "FirstName": "Ridley", "LastName": "Scott"},
        {"ID": "_p2", "FirstName": "Sigourney", "LastName": "Weaver"},
        {"ID": "_p3", "LastName": "Moebius"},
        {"ID": "_p4", "FirstName": "Karin", "LastName": "Buchholz"},
    ],
    "Company": [
        {"ID": "_c1", "Name": "Twentieth Century Fox", "NameAddOn": "Film Corporation"},
        {"ID": "_c2", "Name": "Brandywine Productions"},
    ],
    "Award": [
        {"ID": "_a1", "Name": "Academy Award"},
    ],
    "Weblink": [
        {
            "ID": "_w1",
            "URL": "https://www.imdb.com/title/tt0078748/",
            "EnglishTitle": "IMDb",
            "GermanTitle": "IMDb (englisch)",
            "LanguageID": "_en",
        },
    ],
    # _cn1 and _cn2 point at each other
    "Connection": [
        {"ID": "_cn1", "Title": "Alien", "ConnectionID": "_cn2"},
        {"ID": "_cn2", "Title": "Alien Franchise", "ConnectionID": "_cn1"},
    ],
    "Movie": [
        {
            "ID": "_xxx",
            "OriginalTitle": "Alien",
            "EnglishTitle": "Alien",
            "GermanTitle": "Alien - Das unheimliche Wesen aus einer fremden Welt",
            "ReleaseDate": "1979-05-25",
            "TypeID": "_mv",
            "StatusID": "ok",
            "LastUpdated": "2020-01-01",
            "Budget": "$11,000,000",
            "WorldwideGross": "$104,931,801",
            "WorldwideGrossDate": "2009-01-01",
            "ConnectionID": "_cn1",
        },
        {
            "ID": "_yyy",
            "OriginalTitle": "Aliens",
            "ReleaseDate": "1986-07-18",
            "StatusID": "ok",
        },
        {
            "ID": "_zzz",
            "OriginalTitle": "Prometheus",
            "ReleaseDate": "2012-05-30",
            "StatusID": "wip",
        },
    ],
    "Movie_Genre": [
        {"ID": "_mg1", "MovieID": "_xxx", "GenreID": "_g2"},
        {"ID": "_mg2", "MovieID": "_xxx", "GenreID": "_g1"},
    ],
    "Movie_Country": [
        {"ID": "_mc1", "MovieID": "_xxx", "CountryID": "_us"},
    ],
    "Movie_Language": [
        {"ID": "_ml1", "MovieID": "_xxx", "LanguageID": "_en"},
    ],
    "Movie_Runtime": [
        {"ID": "_mr1", "MovieID": "_xxx", "Runtime": 117, "EditionID": "_th"},
    ],
    "Movie_Director": [
        {"ID": "_md1", "MovieID": "_xxx", "PersonID": "_p1"},
    ],
    "Movie_Cast": [
        {"ID": "_ma1", "MovieID": "_xxx", "ActorID": "_p2", "DubberID": "_p4", "Character": "Ripley"},
    ],
    "Movie_ProductionDesign": [
        {"ID": "_mpd1", "MovieID": "_xxx", "PersonID": "_p3", "Details": "(concept art)"},
    ],
    "Movie_ProductionCompany": [
        {"ID": "_mpc1", "MovieID": "_xxx", "CompanyID": "_c2", "Role": "in association with"},
    ],
    "Movie_Distributor": [
        {
            "ID": "_mdc1",
            "MovieID": "_xxx",
            "CompanyID": "_c1",
            "CountryID": "_us",
            "ReleaseDate": "1979-05-25",
            "Role": "theatrical",
        },
    ],
    "Movie_FilmingDate": [
        {"ID": "_mfd1", "MovieID": "_xxx", "StartDate": "1978-07-05", "EndDate": "1978-10-21"},
    ],
    "Movie_Award": [
        {
            "ID": "_maw1",
            "MovieID": "_xxx",
            "AwardID": "_a1",
            "Category": "Best Visual Effects",
            "Date": "1980",
            "Winner": "Won",
        },
        {
            "ID": "_maw2",
            "MovieID": "_xxx",
            "AwardID": "_a1",
            "Category": "Best Art Direction",
            "Date": "1980",
            "Winner": "Nominated",
        },
    ],
    "Movie_Award_Person": [
        {"ID": "_map1", "Movie_AwardID": "_maw2", "PersonID": "_p3"},
    ],
    "Movie_Weblink": [
        {"ID": "_mw1", "MovieID": "_xxx", "WeblinkID": "_w1"},
    ],
    "Series": [
        {
            "ID": "_sss",
            "OriginalTitle": "Firefly",
            "ReleaseDateFirstEpisode": "2002-09-20",
            "ReleaseDateLastEpisode": "2002-12-20",
            "NoOfSeasons": "1",
            "NoOfEpisodes": "14",
            "StatusID": "ok",
        },
    ],
}


# ----- Database Fixtures -----

@pytest.fixture
def db_path(tmp_path) -> Path:
    """SQLite database with every table and the fixture rows."""
    path = tmp_path / "infothek.db"
    engine = create_engine(f"sqlite:///{path}", future=True)
    metadata.create_all(engine)
    with engine.begin() as connection:
        for table_name, rows in FIXTURE_ROWS.items():
            for row in rows:
                connection.execute(metadata.tables[table_name].insert().values(**row))
    engine.dispose()
    return path


@pytest.fixture
def reader(db_path):
    """DBReader over the fixture database."""
    db_reader = DBReader(db_path)
    yield db_reader
    db_reader.dispose()


@pytest.fixture
def mock_logger():
    """Mocked logger for asserting logging calls."""
    return MagicMock(spec=InfothekLogger)


@pytest.fixture
def logged_reader(db_path, mock_logger):
    """DBReader over the fixture database with a mocked logger."""
    db_reader = DBReader(db_path, logger=mock_logger)
    yield db_reader
    db_reader.dispose()

"""
Tests for the Entry base class: construction, retrieval and the
reference cycle guard.
"""

import pytest

from infothek.core.exceptions import ArgumentNullError, MissingIdError
from infothek.database.models import (
    Company,
    Connection,
    Genre,
    GenreItem,
    Movie,
    Person,
    Status,
    registered_classes,
    resolve,
)


class TestRegistry:
    def test_resolve_known_class(self):
        assert resolve("Genre") is Genre
        assert resolve("GenreItem") is GenreItem

    def test_resolve_unknown_class(self):
        with pytest.raises(LookupError):
            resolve("NoSuchEntity")

    def test_every_article_and_item_registered(self):
        classes = registered_classes()
        for name in ("Movie", "Series", "CastPersonItem", "DistributorCompanyItem"):
            assert name in classes


class TestConstruction:
    """Tests for Entry construction checks."""

    def test_none_reader_rejected(self):
        with pytest.raises(ArgumentNullError):
            Genre(None, "_g1")

    def test_none_id_rejected(self, reader):
        with pytest.raises(ArgumentNullError):
            Genre(reader, None)

    def test_defaults(self, reader):
        genre = Genre(reader)
        assert genre.id == ""
        assert genre.details is None
        assert genre.status is None
        assert genre.table_name == "Genre"

    def test_cleared_id_raises_on_retrieve(self, reader):
        genre = Genre(reader, "_g1")
        genre.id = None
        with pytest.raises(MissingIdError):
            genre.retrieve()


class TestColumnMap:
    def test_status_keeps_status_id_as_text(self):
        columns, references = Status.column_map()
        assert columns["StatusID"] == "status_id"
        assert "StatusID" not in references

    def test_inherited_columns_and_references(self):
        columns, references = Genre.column_map()
        assert columns["Details"] == "details"
        assert columns["EnglishTitle"] == "english_title"
        assert references["StatusID"] == ("status", "Status")


class TestRetrieve:
    """Tests for Entry.retrieve."""

    def test_found(self, reader):
        genre = Genre(reader, "_g1")
        assert genre.retrieve() == 1
        assert genre.english_title == "Science Fiction"
        assert genre.german_title == "Science-Fiction"

    def test_not_found_leaves_defaults(self, reader):
        genre = Genre(reader, "_missing")
        assert genre.retrieve() == 0
        assert genre.english_title is None

    def test_empty_id_not_found(self, reader):
        movie = Movie(reader)
        assert movie.retrieve(False) == 0
        assert movie.genres == []

    def test_fetch_classmethod(self, reader):
        company, found = Company.fetch(reader, "_c1")
        assert found is True
        assert company.full_name == "Twentieth Century Fox Film Corporation"

    def test_fetch_missing(self, reader):
        company, found = Company.fetch(reader, "_nope")
        assert found is False
        assert company.full_name == ""

    def test_null_columns_map_to_none(self, reader):
        company, _ = Company.fetch(reader, "_c2")
        assert company.name_add_on is None
        assert company.full_name == "Brandywine Productions"

    def test_person_name_derived(self, reader):
        person, _ = Person.fetch(reader, "_p1")
        assert person.name == "Ridley Scott"

    def test_person_known_by_last_name_only(self, reader):
        person, _ = Person.fetch(reader, "_p3")
        assert person.name == "Moebius"

    def test_nested_reference_loaded(self, reader):
        movie, _ = Movie.fetch(reader, "_xxx", basic_only=True)
        assert movie.status.english_title == "Finished"
        assert movie.type.german_title == "Film"


class TestCycleGuard:
    """A reference back to an entry already being retrieved is left empty."""

    def test_connection_cycle_terminates(self, logged_reader, mock_logger):
        connection, found = Connection.fetch(logged_reader, "_cn1")

        assert found is True
        assert connection.base_connection.id == "_cn2"
        assert connection.base_connection.base_connection is None
        mock_logger.log_warning.assert_called_once()
        message, details = mock_logger.log_warning.call_args[0]
        assert "cycle" in message.lower()
        assert details["table"] == "Connection"
        assert details["id"] == "_cn1"

    def test_root_follows_base_connection(self, reader):
        connection, _ = Connection.fetch(reader, "_cn1")
        assert connection.root().id == "_cn2"

    def test_root_of_top_level_connection_is_itself(self, reader):
        connection = Connection(reader, "_top")
        assert connection.root() is connection

    def test_same_entry_in_sibling_references_is_not_a_cycle(self, reader):
        movie, _ = Movie.fetch(reader, "_xxx", basic_only=True)
        assert movie.status is not None
        assert movie.connection.base_connection is not None

"""
Tests for the in-memory flight cache.
"""

import pytest
import mysql.connector

from flight_manager.core.cache import FlightCache
from flight_manager.errors import StoreError


class TestFlightCache:
    """Test cases for FlightCache."""

    @pytest.fixture
    def cache(self):
        """Create an empty cache for testing."""
        return FlightCache()

    def test_empty_cache(self, cache):
        """Test a new cache is empty."""
        assert len(cache) == 0
        assert cache.list() == []

    def test_add_keeps_insertion_order(self, cache, make_flight):
        """Test that records are listed in insertion order."""
        for number in ("C3", "A1", "B2"):
            cache.add(make_flight(number))

        assert [f.flight_number for f in cache.list()] == ["C3", "A1", "B2"]

    def test_add_allows_duplicates(self, cache, make_flight):
        """Test that duplicate flight numbers are kept."""
        cache.add(make_flight("AA100"))
        cache.add(make_flight("AA100"))
        assert len(cache) == 2

    def test_list_returns_copy(self, cache, sample_flight):
        """Test that changing the listed sequence does not change the cache."""
        cache.add(sample_flight)
        listed = cache.list()
        listed.clear()
        assert len(cache) == 1

    def test_update_gate_found(self, cache, sample_flight):
        """Test updating a cached flight."""
        cache.add(sample_flight)

        updated = cache.update_gate("AA100", "G9")

        assert updated is sample_flight
        assert sample_flight.gate == "G9"

    def test_update_gate_not_found(self, cache, sample_flight):
        """Test updating a flight that is not cached."""
        cache.add(sample_flight)
        assert cache.update_gate("ZZ999", "G9") is None
        assert sample_flight.gate == "G5"

    def test_update_gate_first_match_only(self, cache, make_flight):
        """Test that only the first of several duplicates is updated."""
        first = make_flight("AA100", gate="G1")
        second = make_flight("AA100", gate="G2")
        third = make_flight("AA100", gate="G3")
        for flight in (first, second, third):
            cache.add(flight)

        cache.update_gate("AA100", "G9")

        assert [f.gate for f in cache.list()] == ["G9", "G2", "G3"]

    def test_remove_all_matching(self, cache, make_flight):
        """Test that every record with the flight number is removed."""
        cache.add(make_flight("AA100", gate="G1"))
        cache.add(make_flight("BB200"))
        cache.add(make_flight("AA100", gate="G2"))

        removed = cache.remove_all("AA100")

        assert removed == 2
        assert [f.flight_number for f in cache.list()] == ["BB200"]

    def test_remove_all_no_match(self, cache, sample_flight):
        """Test removing a flight that is not cached."""
        cache.add(sample_flight)
        assert cache.remove_all("ZZ999") == 0
        assert len(cache) == 1

    def test_drain_and_sync_inserts_in_order(self, cache, store, connection, make_flight):
        """Test that sync inserts every record in order and empties the cache."""
        a = make_flight("A1")
        b = make_flight("B2")
        cache.add(a)
        cache.add(b)

        inserted = cache.drain_and_sync(store)

        assert inserted == 2
        assert connection.inserts() == [a.as_row(), b.as_row()]
        assert len(cache) == 0

    def test_drain_and_sync_empty(self, cache, store, connection):
        """Test syncing an empty cache issues no inserts."""
        assert cache.drain_and_sync(store) == 0
        assert connection.inserts() == []

    def test_drain_and_sync_reinserts_stored_flights(self, cache, store, connection, sample_flight):
        """Test that a flight already in the database is inserted again."""
        store.insert(sample_flight)
        cache.add(sample_flight)

        cache.drain_and_sync(store)

        assert len(connection.rows) == 2

    def test_drain_and_sync_failure_keeps_cache(self, cache, store, connection, make_flight):
        """Test that a failed insert propagates and leaves the cache intact."""
        cache.add(make_flight("A1"))
        cache.add(make_flight("B2"))
        connection.fail_with = mysql.connector.errors.OperationalError("gone")

        with pytest.raises(StoreError):
            cache.drain_and_sync(store)

        assert len(cache) == 2

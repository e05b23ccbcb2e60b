"""Tests for the unified spot read model."""

from datetime import timedelta
from decimal import Decimal
from unittest.mock import patch

from django.contrib.auth import get_user_model
from django.db import DatabaseError
from django.test import TestCase
from django.utils import timezone
from model_bakery import baker

from spots.models import CommunitySpot, FeaturedSpot
from spots.unified import (
    DEFAULT_FACILITIES,
    DEFAULT_VIBES,
    community_to_unified,
    get_all_spots,
    get_community_spot,
    get_spot_by_id,
    parse_community_id,
    update_community_spot,
    update_featured_spot,
)

User = get_user_model()


def make_featured(spot_id, sort_order=0, **kwargs):
    defaults = {
        "name": spot_id.title(),
        "location": "Bygdøy, Oslo",
        "latitude": Decimal("59.896700"),
        "longitude": Decimal("10.677400"),
        "water_temperature": 21.5,
        "water_quality": "Excellent",
        "facilities": ["Toilets"],
        "vibes": ["Sunset Parties"],
    }
    defaults.update(kwargs)
    return FeaturedSpot.objects.create(id=spot_id, sort_order=sort_order, **defaults)


def make_community(status=CommunitySpot.Status.APPROVED, **kwargs):
    defaults = {
        "title": "Hidden Cove",
        "address": "Oslo",
        "description": "nice",
        "latitude": Decimal("59.900000"),
        "longitude": Decimal("10.700000"),
        "main_image_url": "/media/spots/cove.jpg",
    }
    defaults.update(kwargs)
    return baker.make(CommunitySpot, status=status, **defaults)


class GetAllSpotsTest(TestCase):
    def test_returns_union_of_active_featured_and_approved_community(self):
        huk = make_featured("huk", sort_order=1)
        make_featured("closed", sort_order=2, is_active=False)
        approved = make_community()
        make_community(status=CommunitySpot.Status.PENDING, title="Pending")
        make_community(status=CommunitySpot.Status.REJECTED, title="Rejected")

        spots = get_all_spots()

        self.assertEqual([s.id for s in spots], [huk.id, f"community-{approved.id}"])

    def test_exactly_one_discriminator_per_entry(self):
        make_featured("huk")
        make_community()

        for spot in get_all_spots():
            self.assertNotEqual(spot.is_community_spot, spot.is_featured_spot)

    def test_featured_ordered_by_sort_order_before_community(self):
        make_featured("sorenga", sort_order=2)
        make_featured("huk", sort_order=1)
        make_community()

        ids = [s.id for s in get_all_spots()]

        self.assertEqual(ids[:2], ["huk", "sorenga"])
        self.assertTrue(ids[2].startswith("community-"))

    def test_community_most_recently_approved_first(self):
        now = timezone.now()
        older = make_community(title="Older", approved_at=now - timedelta(days=2))
        newer = make_community(title="Newer", approved_at=now)

        ids = [s.community_spot_id for s in get_all_spots()]

        self.assertEqual(ids, [newer.id, older.id])

    def test_empty_when_nothing_stored(self):
        self.assertEqual(get_all_spots(), [])

    @patch("spots.unified._fetch_approved_community_spots")
    def test_community_failure_degrades_to_featured_only(self, mock_fetch):
        mock_fetch.side_effect = RuntimeError("store unavailable")
        make_featured("huk")

        spots = get_all_spots()

        self.assertEqual([s.id for s in spots], ["huk"])

    @patch("spots.unified._fetch_approved_community_spots")
    @patch("spots.unified._fetch_featured_spots")
    def test_both_sources_failing_returns_empty_list(self, mock_featured, mock_community):
        mock_featured.side_effect = RuntimeError("down")
        mock_community.side_effect = RuntimeError("down")

        self.assertEqual(get_all_spots(), [])


class CommunityNormalizationTest(TestCase):
    def test_defaults_applied_for_unset_fields(self):
        spot = community_to_unified(make_community())

        self.assertEqual(spot.water_temperature, 18.0)
        self.assertEqual(spot.water_quality, "Good")
        self.assertEqual(spot.crowd_level, "Moderate")
        self.assertEqual(spot.party_level, "Chill")
        self.assertFalse(spot.byob_friendly)
        self.assertFalse(spot.sunset_views)
        self.assertEqual(spot.facilities, DEFAULT_FACILITIES)
        self.assertEqual(spot.vibes, DEFAULT_VIBES)

    def test_submitter_values_kept(self):
        spot = community_to_unified(make_community(
            water_temperature=16.0,
            water_quality="Fair",
            party_level="Quiet",
            byob_friendly=True,
            facilities=["Jetty"],
        ))

        self.assertEqual(spot.water_temperature, 16.0)
        self.assertEqual(spot.water_quality, "Fair")
        self.assertEqual(spot.party_level, "Quiet")
        self.assertTrue(spot.byob_friendly)
        self.assertEqual(spot.facilities, ["Jetty"])

    def test_back_references_and_coordinates(self):
        record = make_community()
        spot = community_to_unified(record)

        self.assertEqual(spot.community_spot_id, record.id)
        self.assertIsNone(spot.featured_spot_id)
        self.assertEqual(spot.submitted_by, record.user_id)
        self.assertEqual(spot.coordinates, {"lat": 59.9, "lon": 10.7})
        self.assertEqual(spot.name, "Hidden Cove")
        self.assertEqual(spot.location, "Oslo")


class GetSpotByIdTest(TestCase):
    def test_community_prefix_looks_up_community_store(self):
        record = make_community(status=CommunitySpot.Status.PENDING)

        spot = get_spot_by_id(f"community-{record.id}")

        self.assertTrue(spot.is_community_spot)
        self.assertEqual(spot.community_spot_id, record.id)

    def test_plain_id_looks_up_featured_store(self):
        make_featured("42")
        record = make_community()

        spot = get_spot_by_id("42")

        self.assertTrue(spot.is_featured_spot)
        self.assertEqual(spot.featured_spot_id, "42")
        self.assertNotEqual(spot.id, record.unified_id)

    def test_plain_numeric_id_does_not_hit_community_store(self):
        record = make_community()

        self.assertIsNone(get_spot_by_id(str(record.id)))

    def test_missing_rows_return_none(self):
        self.assertIsNone(get_spot_by_id("community-999999"))
        self.assertIsNone(get_spot_by_id("nowhere"))
        self.assertIsNone(get_spot_by_id(""))

    def test_malformed_community_id_returns_none(self):
        self.assertIsNone(get_spot_by_id("community-abc"))
        self.assertIsNone(parse_community_id("community-"))

    def test_store_error_returns_none(self):
        record = make_community()
        make_featured("huk")

        with patch("spots.unified.CommunitySpot.objects.filter", side_effect=DatabaseError("down")):
            self.assertIsNone(get_spot_by_id(f"community-{record.id}"))
        with patch("spots.unified.FeaturedSpot.objects.filter", side_effect=DatabaseError("down")):
            self.assertIsNone(get_spot_by_id("huk"))


class SpotUpdateTest(TestCase):
    def test_update_community_spot(self):
        record = make_community()

        self.assertTrue(update_community_spot(record.id, title="Quiet Cove"))

        self.assertEqual(get_community_spot(record.id).title, "Quiet Cove")

    def test_update_missing_community_spot(self):
        self.assertFalse(update_community_spot(999999, title="Nope"))

    def test_update_featured_spot(self):
        make_featured("huk")

        self.assertTrue(update_featured_spot("huk", water_temperature=22.0))

        self.assertEqual(FeaturedSpot.objects.get(id="huk").water_temperature, 22.0)
        self.assertFalse(update_featured_spot("missing", water_temperature=1.0))

"""Tests for favorite toggling."""

from unittest.mock import patch

from django.contrib.auth import get_user_model
from django.db import IntegrityError
from django.test import TestCase
from model_bakery import baker

from spots.favorites import (
    is_favorite,
    list_favorites,
    remove_favorite,
    toggle_favorite,
)
from spots.models import Favorite

User = get_user_model()


class ToggleFavoriteTest(TestCase):
    def setUp(self):
        self.user = baker.make(User)

    def test_first_toggle_adds(self):
        result = toggle_favorite(self.user, "huk", "Huk Beach", 21.5)

        self.assertTrue(result.is_favorite)
        self.assertEqual(result.action, "added")
        favorite = Favorite.objects.get(user=self.user, spot_id="huk")
        self.assertEqual(favorite.spot_name, "Huk Beach")
        self.assertEqual(favorite.water_temperature, 21.5)

    def test_second_toggle_removes(self):
        toggle_favorite(self.user, "huk")
        result = toggle_favorite(self.user, "huk")

        self.assertFalse(result.is_favorite)
        self.assertEqual(result.action, "removed")
        self.assertFalse(Favorite.objects.filter(user=self.user).exists())

    def test_duplicate_insert_is_already_favorited(self):
        """A racing insert that hits the unique constraint is not an error."""
        Favorite.objects.create(user=self.user, spot_id="community-7")

        with patch("spots.favorites.Favorite.objects.filter") as mock_filter:
            mock_filter.return_value.first.return_value = None
            result = toggle_favorite(self.user, "community-7")

        self.assertTrue(result.is_favorite)
        self.assertEqual(result.action, "already_favorited")
        self.assertEqual(Favorite.objects.filter(user=self.user, spot_id="community-7").count(), 1)

    def test_unique_constraint_enforced(self):
        Favorite.objects.create(user=self.user, spot_id="huk")

        with self.assertRaises(IntegrityError):
            Favorite.objects.create(user=self.user, spot_id="huk")

    def test_favorites_are_per_user(self):
        other = baker.make(User)
        toggle_favorite(self.user, "huk")

        result = toggle_favorite(other, "huk")

        self.assertEqual(result.action, "added")
        self.assertEqual(Favorite.objects.filter(spot_id="huk").count(), 2)


class FavoriteQueriesTest(TestCase):
    def setUp(self):
        self.user = baker.make(User)

    def test_is_favorite(self):
        toggle_favorite(self.user, "community-3")

        self.assertTrue(is_favorite(self.user, "community-3"))
        self.assertFalse(is_favorite(self.user, "huk"))

    def test_list_favorites_newest_first(self):
        toggle_favorite(self.user, "huk")
        toggle_favorite(self.user, "katten")

        spot_ids = [f.spot_id for f in list_favorites(self.user)]

        self.assertEqual(spot_ids, ["katten", "huk"])

    def test_remove_favorite_only_own(self):
        other = baker.make(User)
        favorite = Favorite.objects.create(user=other, spot_id="huk")

        self.assertFalse(remove_favorite(self.user, favorite.id))
        self.assertTrue(remove_favorite(other, favorite.id))
        self.assertFalse(Favorite.objects.filter(id=favorite.id).exists())
